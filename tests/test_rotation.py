"""Tests for rotation policy, filename generation and directory scanning"""

import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from daily_logger.rotation import (
    build_filename,
    filename_pattern,
    format_timestamp,
    generate_filepath,
    next_index,
    parse_index,
    should_rotate,
    to_utc,
)


def _touch(directory: Path, name: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("x\n")
    return path


class TestShouldRotate:
    """Test rotation policy decisions."""

    def test_unhealthy_stream_always_rotates(self):
        assert should_rotate(0, 1, 100, file_is_open=False, file_is_healthy=False)
        assert should_rotate(0, 1, 100, file_is_open=True, file_is_healthy=False)

    def test_below_limit_does_not_rotate(self):
        assert not should_rotate(50, 49, 100, file_is_open=True)

    def test_reaching_limit_rotates(self):
        assert should_rotate(50, 50, 100, file_is_open=True)
        assert should_rotate(90, 20, 100, file_is_open=True)

    def test_no_open_file_does_not_rotate(self):
        """A record larger than the limit still goes into a fresh file."""
        assert not should_rotate(0, 500, 100, file_is_open=False)


class TestTimestampFormat:
    """Test UTC timestamp helpers."""

    def test_naive_timestamp_is_utc(self):
        ts = to_utc(datetime(2024, 3, 1, 23, 30))
        assert ts.tzinfo == timezone.utc
        assert ts.hour == 23

    def test_aware_timestamp_is_converted(self):
        plus_nine = timezone(timedelta(hours=9))
        ts = datetime(2024, 3, 2, 1, 0, tzinfo=plus_nine)
        assert format_timestamp(ts, "%Y-%m-%d") == "2024-03-01"

    def test_none_is_now(self):
        before = datetime.now(timezone.utc)
        ts = to_utc(None)
        assert ts >= before


class TestBuildFilename:
    """Test filename construction."""

    def test_first_file_has_no_index(self):
        assert build_filename("2024-03-01", "app") == "2024-03-01_app.log"

    def test_index_is_bracketed(self):
        assert build_filename("2024-03-01", "app", 1) == "2024-03-01[1]_app.log"
        assert build_filename("2024-03-01", "app", 12) == "2024-03-01[12]_app.log"

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError):
            build_filename("2024-03-01", "app", -1)


class TestFilenamePattern:
    """Test filename matching grammar."""

    def test_matches_generated_names(self):
        pattern = filename_pattern("2024-03-01", "app")
        assert pattern.fullmatch("2024-03-01_app.log")
        assert pattern.fullmatch("2024-03-01[7]_app.log")

    def test_rejects_other_names(self):
        pattern = filename_pattern("2024-03-01", "app")
        assert not pattern.fullmatch("2024-03-02_app.log")
        assert not pattern.fullmatch("2024-03-01_other.log")
        assert not pattern.fullmatch("2024-03-01_app.log.gz")
        assert not pattern.fullmatch("2024-03-01_app.txt")
        assert not pattern.fullmatch("x2024-03-01_app.log")

    def test_suffix_is_literal(self):
        pattern = filename_pattern("2024-03-01", "a.b")
        assert pattern.fullmatch("2024-03-01_a.b.log")
        assert not pattern.fullmatch("2024-03-01_aXb.log")


class TestParseIndex:
    """Test bracket index parsing."""

    def test_no_bracket_is_zero(self):
        assert parse_index(None) == 0

    def test_numeric_bracket(self):
        assert parse_index("3") == 3
        assert parse_index("012") == 12

    def test_malformed_bracket_is_zero(self):
        assert parse_index("x") == 0
        assert parse_index("") == 0
        assert parse_index("-1") == 0
        assert parse_index("\u0663") == 0  # Arabic-Indic digit three

    def test_matched_group_is_parsed(self):
        pattern = filename_pattern("2024-03-01", "app")
        match = pattern.fullmatch("2024-03-01[7]_app.log")
        assert parse_index(match.group("index")) == 7


class TestNextIndex:
    """Test recovery of the next free index from disk."""

    def test_missing_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            assert next_index(Path(tmpdir) / "2024-03", "2024-03-01", "app") == 0

    def test_path_is_a_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _touch(Path(tmpdir), "2024-03")
            assert next_index(path, "2024-03-01", "app") == 0

    def test_empty_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            assert next_index(tmpdir, "2024-03-01", "app") == 0

    def test_first_file_exists(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            _touch(Path(tmpdir), "2024-03-01_app.log")
            assert next_index(tmpdir, "2024-03-01", "app") == 1

    def test_gap_uses_highest_index(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            _touch(Path(tmpdir), "2024-03-01_app.log")
            _touch(Path(tmpdir), "2024-03-01[2]_app.log")
            assert next_index(tmpdir, "2024-03-01", "app") == 3

    def test_malformed_bracket_counts_as_zero(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            _touch(Path(tmpdir), "2024-03-01[x]_app.log")
            assert next_index(tmpdir, "2024-03-01", "app") == 1

    def test_ignores_other_days_and_suffixes(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            _touch(Path(tmpdir), "2024-03-02[5]_app.log")
            _touch(Path(tmpdir), "2024-03-01[9]_other.log")
            _touch(Path(tmpdir), "notes.txt")
            assert next_index(tmpdir, "2024-03-01", "app") == 0

    def test_does_not_recurse(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            _touch(Path(tmpdir) / "nested", "2024-03-01[4]_app.log")
            assert next_index(tmpdir, "2024-03-01", "app") == 0

    def test_bracket_in_suffix_is_not_an_index(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            _touch(Path(tmpdir), "2024-03-01_a[5].log")
            assert next_index(tmpdir, "2024-03-01", "a[5]") == 1

    def test_unlistable_directory_returns_zero(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            _touch(Path(tmpdir), "2024-03-01[2]_app.log")
            with patch(
                "daily_logger.rotation.scanner.os.scandir",
                side_effect=PermissionError("denied"),
            ):
                assert next_index(tmpdir, "2024-03-01", "app") == 0

    def test_failure_mid_scan_keeps_seen_entries(self):
        class Entry:
            def __init__(self, name):
                self.name = name

        class BrokenListing:
            def __enter__(self):
                return self

            def __exit__(self, exc_type, exc_val, exc_tb):
                return False

            def __iter__(self):
                yield Entry("2024-03-01[4]_app.log")
                raise OSError("directory removed")

        with tempfile.TemporaryDirectory() as tmpdir:
            with patch(
                "daily_logger.rotation.scanner.os.scandir",
                return_value=BrokenListing(),
            ):
                assert next_index(tmpdir, "2024-03-01", "app") == 5


class TestGenerateFilepath:
    """Test full path generation."""

    def test_monthly_directory_layout(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            now = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
            path = generate_filepath(tmpdir, "app", now)
            assert path == Path(tmpdir) / "2024-03" / "2024-03-01_app.log"
            # Generation does not create anything
            assert not path.parent.exists()

    def test_existing_files_get_next_index(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            monthly = Path(tmpdir) / "2024-03"
            _touch(monthly, "2024-03-01_app.log")
            _touch(monthly, "2024-03-01[1]_app.log")

            now = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
            path = generate_filepath(tmpdir, "app", now)
            assert path.name == "2024-03-01[2]_app.log"
            assert not path.exists()

    def test_uses_utc_day(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            minus_five = timezone(timedelta(hours=-5))
            now = datetime(2024, 3, 31, 22, 0, tzinfo=minus_five)
            path = generate_filepath(tmpdir, "app", now)
            assert path == Path(tmpdir) / "2024-04" / "2024-04-01_app.log"
