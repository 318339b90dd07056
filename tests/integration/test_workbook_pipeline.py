"""Integration tests running the whole pipeline on a real workbook."""

import sys

import pandas as pd
import pytest

from simpgen.__main__ import main
from simpgen.core import Config, MissingCellError, UnpairedCharacterError, WorkbookError
from simpgen.processing import run_pipeline

REVIEW_HEADER = ["繁体", "简体", "精确", "兼容"]
RULE_HEADER = ["繁体", "简体", "类推一", "类推二"]


def write_workbook(path, standalone=(), inferrable=(), rules=(), omit=(), other=(), supplement=()):
    """Write a review workbook with the standard sheet layout."""
    sheets = {
        "表一": (REVIEW_HEADER, standalone),
        "其他": (REVIEW_HEADER, other),
        "增补": (REVIEW_HEADER, supplement),
        "表二": (REVIEW_HEADER, inferrable),
        "表三": (RULE_HEADER, rules),
    }
    for name in omit:
        sheets.pop(name)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for name, (header, rows) in sheets.items():
            frame = pd.DataFrame([list(row) for row in rows], columns=header)
            frame.to_excel(writer, sheet_name=name, index=False)


@pytest.fixture
def workbook(tmp_path):
    """Workbook covering explicit, inferrable, radical and analogy rows."""
    path = tmp_path / "reviews.xlsx"
    write_workbook(
        path,
        standalone=[
            ["心", "心", "", ""],
            ["髮", "发", "髪", ""],
            ["鬆", "松", "鬆？", ""],
        ],
        other=[["乾", "干", "", ""]],
        inferrable=[
            ["門", "门", "", ""],
            ["訁", "讠", "", ""],
        ],
        rules=[
            ["門", "门", "問问 悶闷", ""],
            ["訁", "讠", "語语", "說说"],
            ["車", "车", "陣阵", ""],
        ],
    )
    return path


@pytest.fixture
def conflicted_workbook(tmp_path):
    """Workbook with a scored conflict, a chained explicit mapping and a pinned analogy."""
    path = tmp_path / "conflicted.xlsx"
    write_workbook(
        path,
        standalone=[
            ["閑", "閒", "", ""],
            ["問", "问", "", ""],
        ],
        inferrable=[["門", "门", "", ""]],
        rules=[
            ["門", "门", "閒闲", ""],
            ["日", "日", "閒间", ""],
            ["門", "门", "閒间", ""],
            ["門", "门", "問門", ""],
        ],
    )
    return path


def report_lines(reports, name) -> list[str]:
    """Read one report from the single timestamped report directory."""
    (report_dir,) = reports.iterdir()
    return read_lines(report_dir / name)


def read_lines(path) -> list[str]:
    """Read output lines."""
    return path.read_text(encoding="utf-8").splitlines()


class TestRunPipeline:
    """Test the table written for a workbook."""

    def test_writes_expected_table(self, workbook, tmp_path) -> None:
        """The table holds explicit decisions first, then analogy results."""
        output = tmp_path / "TSCharacters.txt"
        run_pipeline(Config(workbook=str(workbook), output=str(output)))
        assert read_lines(output) == [
            "髮\t髪",
            "鬆\t松",
            "乾\t干",
            "門\t门",
            "問\t问",
            "悶\t闷",
            "語\t语",
            "說\t说",
        ]

    def test_radical_never_emitted(self, workbook, tmp_path) -> None:
        """Radical reviews do not appear in the table."""
        output = tmp_path / "out.txt"
        run_pipeline(Config(workbook=str(workbook), output=str(output)))
        assert not any(line.startswith("訁") for line in read_lines(output))

    def test_rejected_rule_not_emitted(self, workbook, tmp_path) -> None:
        """Outputs of rules with unaccepted premises are left out."""
        output = tmp_path / "out.txt"
        run_pipeline(Config(workbook=str(workbook), output=str(output)))
        assert "陣\t阵" not in read_lines(output)

    def test_rerun_is_byte_identical(self, workbook, tmp_path) -> None:
        """Two runs over the same workbook write identical bytes."""
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        run_pipeline(Config(workbook=str(workbook), output=str(first)))
        run_pipeline(Config(workbook=str(workbook), output=str(second)))
        assert first.read_bytes() == second.read_bytes()

    def test_creates_output_directory(self, workbook, tmp_path) -> None:
        """Missing parent directories are created."""
        output = tmp_path / "opencc" / "TSCharacters.txt"
        run_pipeline(Config(workbook=str(workbook), output=str(output)))
        assert output.exists()


class TestPipelineErrors:
    """Test fatal input errors."""

    def test_unpaired_rule_character_aborts_without_output(self, tmp_path) -> None:
        """An unpaired rule character aborts the run before anything is written."""
        path = tmp_path / "reviews.xlsx"
        write_workbook(path, inferrable=[["門", "门", "", ""]], rules=[["門", "门", "問问悶", ""]])
        output = tmp_path / "out.txt"

        with pytest.raises(UnpairedCharacterError, match="門门"):
            run_pipeline(Config(workbook=str(path), output=str(output)))
        assert not output.exists()

    def test_missing_character_names_row(self, tmp_path) -> None:
        """An empty simplified cell is reported with its sheet and row."""
        path = tmp_path / "reviews.xlsx"
        write_workbook(path, standalone=[["門", "门", "", ""], ["問", "", "", ""]])

        with pytest.raises(MissingCellError, match="'表一', row 3"):
            run_pipeline(Config(workbook=str(path), output=str(tmp_path / "out.txt")))

    def test_whitespace_character_cell_is_missing(self, tmp_path) -> None:
        """A simplified cell holding only a space is reported, not written."""
        path = tmp_path / "reviews.xlsx"
        write_workbook(path, standalone=[["門", " ", "", ""]])
        output = tmp_path / "out.txt"

        with pytest.raises(MissingCellError, match="'表一', row 2"):
            run_pipeline(Config(workbook=str(path), output=str(output)))
        assert not output.exists()

    def test_missing_sheet(self, tmp_path) -> None:
        """A workbook without a required sheet is rejected."""
        path = tmp_path / "reviews.xlsx"
        write_workbook(path, omit=["表三"])

        with pytest.raises(WorkbookError, match="表三"):
            run_pipeline(Config(workbook=str(path), output=str(tmp_path / "out.txt")))

    def test_missing_workbook(self, tmp_path) -> None:
        """A missing workbook is a WorkbookError."""
        with pytest.raises(WorkbookError):
            run_pipeline(Config(workbook=str(tmp_path / "nope.xlsx"), output=str(tmp_path / "o.txt")))


class TestReports:
    """Test report generation."""

    def test_writes_report_files(self, workbook, tmp_path) -> None:
        """A timestamped report directory receives every report."""
        reports = tmp_path / "reports"
        run_pipeline(
            Config(workbook=str(workbook), output=str(tmp_path / "out.txt"), reports=str(reports))
        )
        (report_dir,) = reports.iterdir()
        assert sorted(p.name for p in report_dir.iterdir()) == [
            "chains.txt",
            "conflicts.txt",
            "rejected_rules.txt",
            "shadowed.txt",
            "summary.txt",
        ]

    def test_rejected_rules_report_lists_premise(self, workbook, tmp_path) -> None:
        """Rules with unaccepted premises are listed."""
        reports = tmp_path / "reports"
        run_pipeline(
            Config(workbook=str(workbook), output=str(tmp_path / "out.txt"), reports=str(reports))
        )
        (report_dir,) = reports.iterdir()
        assert "車→车: 陣→阵" in (report_dir / "rejected_rules.txt").read_text(encoding="utf-8")

    def test_conflicts_report_marks_winner_with_scores(self, conflicted_workbook, tmp_path) -> None:
        """Each conflict lists its candidates with net scores and marks the winner."""
        reports = tmp_path / "reports"
        run_pipeline(
            Config(
                workbook=str(conflicted_workbook),
                output=str(tmp_path / "out.txt"),
                reports=str(reports),
            )
        )
        lines = report_lines(reports, "conflicts.txt")
        start = lines.index("閒 → 闲")
        assert lines[start + 1 : start + 3] == ["  * 闲  score +1", "    间  score +0"]

    def test_chains_report_lists_rewrite(self, conflicted_workbook, tmp_path) -> None:
        """Explicit mappings redirected by analogy are listed with their hop count."""
        reports = tmp_path / "reports"
        run_pipeline(
            Config(
                workbook=str(conflicted_workbook),
                output=str(tmp_path / "out.txt"),
                reports=str(reports),
            )
        )
        assert "閑→閒 ⇒ 閑→闲  (1 hop)" in report_lines(reports, "chains.txt")

    def test_chains_report_pluralizes_hops(self, tmp_path) -> None:
        """Fixpoint chains longer than one hop are reported in hops."""
        path = tmp_path / "reviews.xlsx"
        write_workbook(
            path,
            standalone=[["閑", "閒", "", ""]],
            inferrable=[["門", "门", "", ""]],
            rules=[["門", "门", "閒間 間间", ""]],
        )
        reports = tmp_path / "reports"
        run_pipeline(
            Config(
                workbook=str(path),
                output=str(tmp_path / "out.txt"),
                reports=str(reports),
                chain_mode="fixpoint",
            )
        )
        assert "閑→閒 ⇒ 閑→间  (2 hops)" in report_lines(reports, "chains.txt")

    def test_shadowed_report_names_explicit_decision(self, conflicted_workbook, tmp_path) -> None:
        """Analogy winners pinned by a review are listed with the reviewed mapping."""
        reports = tmp_path / "reports"
        run_pipeline(
            Config(
                workbook=str(conflicted_workbook),
                output=str(tmp_path / "out.txt"),
                reports=str(reports),
            )
        )
        assert "問→門  (reviewed as 問→问)" in report_lines(reports, "shadowed.txt")


class TestMain:
    """Test the command-line entry point."""

    def test_main_writes_output(self, workbook, tmp_path, monkeypatch) -> None:
        """Running the CLI writes the table to --output."""
        output = tmp_path / "cli.txt"
        monkeypatch.setattr(sys, "argv", ["simpgen", str(workbook), "-o", str(output)])
        main()
        assert "門\t门" in read_lines(output)

    def test_main_rime_output(self, workbook, tmp_path, monkeypatch) -> None:
        """--rime writes into the RIME OpenCC directory under APPDATA."""
        monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
        monkeypatch.setattr(sys, "argv", ["simpgen", str(workbook), "--rime"])
        main()
        assert (tmp_path / "appdata" / "rime" / "opencc" / "TPCharacters.txt").exists()

    def test_main_exits_on_input_error(self, tmp_path, monkeypatch) -> None:
        """Fatal input errors exit with status 1."""
        monkeypatch.setattr(
            sys, "argv", ["simpgen", str(tmp_path / "missing.xlsx"), "-o", str(tmp_path / "o.txt")]
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_main_rejects_rime_with_output(self, workbook, tmp_path, monkeypatch) -> None:
        """--rime together with -o is a usage error and writes nothing."""
        monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
        output = tmp_path / "cli.txt"
        monkeypatch.setattr(
            sys, "argv", ["simpgen", str(workbook), "--rime", "-o", str(output)]
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 2
        assert not output.exists()
        assert not (tmp_path / "appdata").exists()
