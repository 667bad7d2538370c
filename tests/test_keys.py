"""Tests for column key and date normalization."""

import pytest

from filmarchive.transforms import column_key, truncate_date


class TestColumnKey:
    """Tests for column_key."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Image Technicians", "image_technicians"),
            ("Sound/Image", "sound/image"),
            ("Executive Producer", "executive_producer"),
            ("Music  &\tSound Designers", "music_&_sound_designers"),
            ("Screenwriter", "screenwriter"),
        ],
    )
    def test_normalization(self, label: str, expected: str):
        """Test labels are lowercased with whitespace runs replaced."""
        assert column_key(label) == expected

    def test_deterministic(self):
        """Test the same label always gives the same key."""
        assert column_key("Film Editor") == column_key("Film Editor")


class TestTruncateDate:
    """Tests for truncate_date."""

    def test_timestamp(self):
        """Test a timestamp is cut to its date."""
        assert truncate_date("2021-05-01T00:00:00Z") == "2021-05-01"

    def test_timestamp_with_offset(self):
        """Test a timestamp with an offset is cut to its date."""
        assert truncate_date("2021-05-01T23:30:00+05:00") == "2021-05-01"

    def test_plain_date_unchanged(self):
        """Test a plain date is unchanged."""
        assert truncate_date("2021-05-01") == "2021-05-01"

    def test_empty(self):
        """Test an empty value stays empty."""
        assert truncate_date("") == ""
