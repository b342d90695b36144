from __future__ import annotations

import argparse
from pathlib import Path

from scholarpage.application.services.profile_service import load_profile
from scholarpage.application.services.publication_service import PublicationService
from scholarpage.cli.context import CLIContext
from scholarpage.core.files import write_text_atomic
from scholarpage.web.render import render_site


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("build", help="Render the profile site to static HTML")
    parser.add_argument("--bib", type=Path, default=None, help="Path to .bib file")
    parser.add_argument("--profile", type=Path, default=None, help="Path to profile.json")
    parser.add_argument("--out", type=Path, default=None, help="Output directory")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    bib_path = args.bib or ctx.paths.bib_path
    profile = load_profile(args.profile or ctx.paths.profile_path)
    publications = PublicationService().load(bib_path)

    out_dir = (args.out or ctx.paths.output_dir).expanduser().resolve()
    target = out_dir / "index.html"
    write_text_atomic(target, render_site(profile, publications))

    ctx.console.print(f"[green]Wrote[/green] {target} with {len(publications)} publications")
    return 0
