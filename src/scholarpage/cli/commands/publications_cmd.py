from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from scholarpage.application.services.publication_service import PublicationService
from scholarpage.cli.context import CLIContext
from scholarpage.infrastructure.importers.bibtex_importer import count_entry_markers


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("publications", help="List publications parsed from the bibliography")
    parser.add_argument("--bib", type=Path, default=None, help="Path to .bib file (default: project publications.bib)")
    parser.add_argument("--limit", type=_positive_int, default=None)
    parser.add_argument("--json", action="store_true", help="Print records as JSON instead of a table")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    bib_path = args.bib or ctx.paths.bib_path
    service = PublicationService()

    raw = service.read_bibliography(bib_path)
    publications = service.parse(raw, source=str(bib_path))
    shown = publications if args.limit is None else publications[: args.limit]

    if args.json:
        ctx.console.print_json(json.dumps([asdict(p) for p in shown], ensure_ascii=False))
        return 0

    table = Table(title=f"Publications ({len(shown)})")
    table.add_column("Year")
    table.add_column("Month")
    table.add_column("Title", overflow="fold")
    table.add_column("Authors", overflow="fold")
    table.add_column("Venue")
    table.add_column("URL", overflow="fold")

    for publication in shown:
        table.add_row(
            escape(publication.year),
            escape(publication.month),
            escape(publication.title),
            escape(publication.author),
            escape(publication.venue),
            escape(publication.url),
        )
    ctx.console.print(table)

    summary = service.summarize(publications, entries_seen=count_entry_markers(raw))
    span = ""
    if summary.first_year is not None:
        span = f"{summary.first_year}-{summary.latest_year}"
    ctx.console.print(
        Panel.fit(
            "\n".join(
                [
                    f"Entries seen: {summary.entries_seen}",
                    f"Publications: {summary.publications}",
                    f"Entries skipped: {summary.entries_dropped}",
                    f"Years: {span or 'n/a'}",
                ]
            ),
            title="Bibliography Summary",
        )
    )
    return 0
