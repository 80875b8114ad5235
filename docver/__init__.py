"""
docver - content-driven version counter for document builds
"""

__version__ = "0.3.0"
