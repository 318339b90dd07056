"""Report file writers."""

from pathlib import Path

from simpgen.core import Rule
from simpgen.processing.stages.data_models import DerivationResult
from simpgen.reports.data import ReportData
from simpgen.reports.helpers import format_time, write_report_header, write_section_header


def write_summary(report_dir: Path, data: ReportData) -> None:
    """Write summary.txt with counts and timings."""
    with open(report_dir / "summary.txt", "w", encoding="utf-8") as f:
        write_report_header(f, "SIMPLIFICATION TABLE SUMMARY")
        f.write(f"Workbook: {data.workbook}\n")
        f.write(f"Output:   {data.output}\n")
        f.write(f"Chaining: {data.chain_mode}\n\n")

        write_section_header(f, "Input")
        f.write(f"  Standalone reviews:  {data.standalone_reviews}\n")
        f.write(f"  Inferrable reviews:  {data.inferrable_reviews}\n")
        f.write(f"  Radical reviews:     {data.radical_reviews}\n")
        f.write(f"  Analogy rules:       {data.rules} ({data.accepted_rules} accepted)\n\n")

        write_section_header(f, "Derivation")
        f.write(f"  Explicit mappings:   {data.explicit_mappings}\n")
        f.write(f"  Premises:            {data.premises}\n")
        f.write(f"  Analogy targets:     {data.analogy_targets}\n")
        f.write(f"  Conflicts resolved:  {data.conflicts}\n")
        f.write(f"  Chained mappings:    {data.chained}\n")
        f.write(f"  Pinned analogies:    {data.shadowed}\n")
        f.write(f"  Collapsed to X→X:    {data.dropped_identities}\n")
        f.write(f"  Final mappings:      {data.final_mappings}\n\n")

        write_section_header(f, "Timing")
        f.write(f"  Loading:    {format_time(data.loading_time)}\n")
        f.write(f"  Derivation: {format_time(data.derivation_time)}\n")


def write_conflicts(report_dir: Path, derivation: DerivationResult) -> None:
    """Write conflicts.txt listing every trad with competing candidates."""
    with open(report_dir / "conflicts.txt", "w", encoding="utf-8") as f:
        write_report_header(f, "ANALOGY CONFLICTS")
        if not derivation.conflicts:
            f.write("No conflicts.\n")
            return
        for conflict in derivation.conflicts:
            f.write(f"{conflict.trad} → {conflict.winner.simp}\n")
            for mapping, score in conflict.candidates:
                marker = "*" if mapping == conflict.winner else " "
                f.write(f"  {marker} {mapping.simp}  score {score:+d}\n")
            f.write("\n")


def write_chains(report_dir: Path, derivation: DerivationResult) -> None:
    """Write chains.txt listing explicit mappings redirected by analogy."""
    with open(report_dir / "chains.txt", "w", encoding="utf-8") as f:
        write_report_header(f, "CHAINED MAPPINGS")
        if not derivation.rewrites:
            f.write("No explicit mapping was chained.\n")
            return
        for rewrite in derivation.rewrites:
            hops = f"{rewrite.hops} hop{'s' if rewrite.hops != 1 else ''}"
            f.write(f"{rewrite.original} ⇒ {rewrite.rewritten}  ({hops})\n")


def write_shadowed(report_dir: Path, derivation: DerivationResult) -> None:
    """Write shadowed.txt listing analogy winners pinned out by explicit decisions."""
    explicit = {m.trad: m for m in reversed(derivation.explicit_pool)}
    with open(report_dir / "shadowed.txt", "w", encoding="utf-8") as f:
        write_report_header(f, "ANALOGY RESULTS PINNED BY EXPLICIT DECISIONS")
        if not derivation.assembly.shadowed:
            f.write("No analogy result was pinned.\n")
            return
        for mapping in derivation.assembly.shadowed:
            reviewed = explicit.get(mapping.trad)
            reviewed_str = f"reviewed as {reviewed}" if reviewed else "reviewed"
            f.write(f"{mapping}  ({reviewed_str})\n")


def write_rejected_rules(report_dir: Path, rules: list[Rule], derivation: DerivationResult) -> None:
    """Write rejected_rules.txt listing rules whose premise was not accepted."""
    with open(report_dir / "rejected_rules.txt", "w", encoding="utf-8") as f:
        write_report_header(f, "RULES WITH UNACCEPTED PREMISES")
        rejected = [rule for rule, ok in zip(rules, derivation.scoring.accepted) if not ok]
        if not rejected:
            f.write("Every rule premise was accepted.\n")
            return
        for rule in rejected:
            outputs = " ".join(str(m) for m in rule.output)
            f.write(f"{rule.premise}: {outputs}\n")
