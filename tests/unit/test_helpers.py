"""Unit tests for report and path helpers."""

import os
from io import StringIO

from simpgen.reports.helpers import format_time, write_report_header, write_section_header
from simpgen.utils.helpers import expand_file_path


class TestFormatTime:
    """Test stage duration formatting."""

    def test_sub_second_in_milliseconds(self) -> None:
        """Durations under a second are shown in ms."""
        assert format_time(0.25) == "250ms"

    def test_minutes_and_seconds(self) -> None:
        """Long durations are split into minutes and seconds."""
        assert format_time(75.5) == "1m 15.5s"


class TestReportHeaders:
    """Test report header layout."""

    def test_report_header_has_title_and_timestamp(self) -> None:
        """The header frames the title and records when it was generated."""
        f = StringIO()
        write_report_header(f, "ANALOGY CONFLICTS")
        lines = f.getvalue().splitlines()
        assert lines[1] == "ANALOGY CONFLICTS"
        assert lines[0] == lines[2] == "=" * 80
        assert lines[3].startswith("Generated: ")

    def test_section_header_underlines_title(self) -> None:
        """A section title is followed by a dashed rule."""
        f = StringIO()
        write_section_header(f, "Timing")
        assert f.getvalue() == "Timing\n" + "-" * 80 + "\n"


class TestExpandFilePath:
    """Test path expansion."""

    def test_expands_home(self) -> None:
        """A leading ~ becomes the home directory."""
        assert expand_file_path("~/TSCharacters.txt") == os.path.expanduser("~/TSCharacters.txt")

    def test_empty_path_is_none(self) -> None:
        """Empty and missing paths give None."""
        assert expand_file_path("") is None
        assert expand_file_path(None) is None
