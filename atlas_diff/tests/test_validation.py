"""Tests for file path validation."""

import os
import sys

import pytest

from atlas_diff.utils.validation import ValidationError, validate_file_path


class TestValidateFilePath:
    def test_valid_file(self, tmp_path):
        target = tmp_path / "a.txt"
        target.write_text("content")

        assert validate_file_path(str(target)) == str(target.resolve())

    def test_empty_path(self):
        with pytest.raises(ValidationError, match="File path cannot be empty"):
            validate_file_path("")

    def test_whitespace_path(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_file_path("   ", name="Left file")

    def test_null_byte(self):
        with pytest.raises(ValidationError, match="invalid characters"):
            validate_file_path("bad\x00name.txt")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="no such file or directory"):
            validate_file_path(str(tmp_path / "missing.txt"))

    def test_directory(self, tmp_path):
        with pytest.raises(ValidationError, match="is a directory"):
            validate_file_path(str(tmp_path))

    def test_size_limit(self, tmp_path):
        target = tmp_path / "big.txt"
        target.write_text("x" * 2048)

        with pytest.raises(ValidationError, match="file is too large"):
            validate_file_path(str(target), max_bytes=1024)

    def test_file_at_size_limit(self, tmp_path):
        target = tmp_path / "exact.txt"
        target.write_text("x" * 1024)

        assert validate_file_path(str(target), max_bytes=1024) == str(target.resolve())

    @pytest.mark.skipif(sys.platform == "win32" or getattr(os, "geteuid", lambda: 0)() == 0,
                        reason="permission bits not enforced")
    def test_unreadable_file(self, tmp_path):
        target = tmp_path / "secret.txt"
        target.write_text("hidden")
        target.chmod(0)
        try:
            with pytest.raises(ValidationError, match="permission denied"):
                validate_file_path(str(target))
        finally:
            target.chmod(0o644)
