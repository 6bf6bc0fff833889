"""CLI entrypoint for annotating Chinese text and listing unknown words."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from hanzi_annotator.errors import DictionaryNotLoadedError
from hanzi_annotator.io.tsv_io import write_unknown_tsv
from hanzi_annotator.models import UnknownWordRecord
from hanzi_annotator.pinyin import numbered_to_marked
from hanzi_annotator.pipeline import run_annotation
from hanzi_annotator.reporting.render import render_annotated_text
from hanzi_annotator.reporting.report_md import build_report_md
from hanzi_annotator.validation import collect_kind_counts

PREVIEW_LIMIT = 20


def _resolve_default_cedict_path() -> Path:
    """Resolve default CC-CEDICT path from project layout.

    Returns:
        Preferred dictionary path, favoring ``data/cedict_ts.u8``, then the
        compressed ``data/cedict_ts.u8.gz``, and finally project-root
        ``cedict_ts.u8``.
    """

    for candidate in (Path("data") / "cedict_ts.u8", Path("data") / "cedict_ts.u8.gz"):
        if candidate.exists():
            return candidate
    return Path("cedict_ts.u8")


def _resolve_default_curriculum_path() -> Path:
    """Resolve default curriculum path, preferring TSV over CSV under ``data/``."""

    tsv_path = Path("data") / "curriculum.tsv"
    csv_path = Path("data") / "curriculum.csv"
    if not tsv_path.exists() and csv_path.exists():
        return csv_path
    return tsv_path


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for the CLI."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the annotate command.
    """

    parser = argparse.ArgumentParser(
        description="Annotate Chinese text with pinyin and list words not in your curriculum."
    )
    parser.add_argument("--input", required=True, type=Path, help="Text (.txt) or PDF file to annotate.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Unknown-word TSV output path (default: <input>.unknown.tsv).",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Markdown report output path (default: report.md next to TSV).",
    )
    parser.add_argument(
        "--annotated",
        type=Path,
        default=None,
        help="Optional path for the annotated plain-text rendering.",
    )
    parser.add_argument(
        "--cedict",
        type=Path,
        default=_resolve_default_cedict_path(),
        help="Path to CC-CEDICT .u8 or .u8.gz file.",
    )
    parser.add_argument(
        "--curriculum",
        type=Path,
        default=_resolve_default_curriculum_path(),
        help="Path to curriculum TSV/CSV (columns Simplified, Chapter, Pinyin, Category, Meaning).",
    )
    parser.add_argument("--page-start", type=int, default=None, help="1-based start page for PDF input.")
    parser.add_argument("--page-end", type=int, default=None, help="1-based end page for PDF input.")
    parser.add_argument(
        "--numbered",
        action="store_true",
        help="Keep numbered pinyin (ni3 hao3) in reports instead of tone marks.",
    )
    parser.add_argument("--no-header", action="store_true", help="Do not write TSV header.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def _print_output_analysis(
    kind_counts: dict[str, int],
    unknown_words: Sequence[UnknownWordRecord],
    marked: bool,
) -> None:
    """Print segment and unknown-word summary tables.

    Args:
        kind_counts: Segment counts keyed by kind label.
        unknown_words: Ranked unknown-word records.
        marked: Whether to show tone-marked pinyin.
    """

    kind_rows = [
        [kind, str(count)]
        for kind, count in sorted(kind_counts.items(), key=lambda item: (-item[1], item[0]))
    ]
    print("\nSegments by kind:")
    print(_format_table(["kind", "count"], kind_rows))

    if not unknown_words:
        print("\nNo unknown words found.")
        return

    preview_rows = [
        [
            str(record.rank),
            record.word,
            numbered_to_marked(record.pinyin) if marked else record.pinyin,
            record.meaning,
        ]
        for record in unknown_words[:PREVIEW_LIMIT]
    ]
    print(f"\nUnknown words ({len(unknown_words)} total, first {len(preview_rows)} shown):")
    print(_format_table(["rank", "word", "pinyin", "meaning"], preview_rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.input.exists():
        raise SystemExit(f"Input not found: {args.input}")
    if not args.cedict.exists():
        raise SystemExit(f"CC-CEDICT file not found: {args.cedict}")

    output_path = args.output if args.output is not None else args.input.with_suffix(".unknown.tsv")
    report_path = args.report if args.report is not None else output_path.parent / "report.md"
    marked = not args.numbered

    try:
        result = run_annotation(
            text_path=args.input,
            cedict_path=args.cedict,
            curriculum_path=args.curriculum,
            page_start=args.page_start,
            page_end=args.page_end,
        )
    except DictionaryNotLoadedError as exc:
        raise SystemExit(f"{exc} Check {args.cedict}.") from exc

    write_unknown_tsv(result.unknown_words, output_path=output_path, include_header=not args.no_header)
    report_md = build_report_md(args.input.name, result.segments, result.unknown_words, marked=marked)
    report_path.write_text(report_md, encoding="utf-8")

    print(f"Wrote {len(result.unknown_words)} unknown words to {output_path}")
    print(f"Wrote report to {report_path}")

    if args.annotated is not None:
        args.annotated.write_text(
            render_annotated_text(result.segments, marked=marked) + "\n", encoding="utf-8"
        )
        print(f"Wrote annotated text to {args.annotated}")

    _print_output_analysis(collect_kind_counts(result.segments), result.unknown_words, marked)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
