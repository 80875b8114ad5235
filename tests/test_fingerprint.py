"""Tests for the observed-set fingerprint."""

import hashlib

import pytest

from docver.core import compute_fingerprint
from docver.exceptions import ConfigurationError, ObservedFileError


class TestComputeFingerprint:
    """Test compute_fingerprint"""

    def test_sha1_of_concatenation(self, sources):
        assert compute_fingerprint(sources) == hashlib.sha1(b"xy").hexdigest()

    def test_lowercase_hex_single_line(self, sources):
        fingerprint = compute_fingerprint(sources)
        assert len(fingerprint) == 40
        assert fingerprint == fingerprint.lower()
        assert "\n" not in fingerprint

    def test_deterministic(self, sources):
        assert compute_fingerprint(sources) == compute_fingerprint(sources)

    def test_order_matters(self, sources):
        assert compute_fingerprint(sources) != compute_fingerprint(list(reversed(sources)))

    def test_no_separator_between_files(self, tmp_path):
        """Only the concatenated byte stream counts, not file boundaries."""
        one = tmp_path / "one"
        two = tmp_path / "two"
        one.write_bytes(b"ab")
        two.write_bytes(b"c")
        joined = tmp_path / "joined"
        joined.write_bytes(b"abc")

        assert compute_fingerprint([one, two]) == compute_fingerprint([joined])

    def test_large_file_streamed(self, tmp_path):
        big = tmp_path / "big.bin"
        data = b"0123456789" * 20000
        big.write_bytes(data)
        assert compute_fingerprint([big]) == hashlib.sha1(data).hexdigest()

    def test_empty_file(self, tmp_path):
        empty = tmp_path / "empty.tex"
        empty.write_bytes(b"")
        assert compute_fingerprint([empty]) == hashlib.sha1(b"").hexdigest()

    def test_missing_file_is_fatal(self, sources, tmp_path):
        missing = tmp_path / "missing.tex"
        with pytest.raises(ObservedFileError) as exc_info:
            compute_fingerprint(sources + [missing])
        assert exc_info.value.details["path"] == str(missing)
        assert exc_info.value.exit_code == 2

    def test_directory_is_fatal(self, tmp_path):
        with pytest.raises(ObservedFileError):
            compute_fingerprint([tmp_path])

    def test_empty_observed_set_rejected(self):
        with pytest.raises(ConfigurationError):
            compute_fingerprint([])
