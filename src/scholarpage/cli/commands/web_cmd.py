from __future__ import annotations

import argparse
import os

from scholarpage.cli.context import CLIContext

APP_FACTORY = "scholarpage.web.app:create_default_app"


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("web", help="Serve the profile site")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--reload", action="store_true", help="Restart the server when source files change")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    try:
        import uvicorn
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("uvicorn is required for web mode. Install project dependencies.") from exc

    # The factory runs in the server process (a fresh one under --reload), so
    # the resolved paths travel through the environment.
    os.environ["SCHOLARPAGE_ROOT"] = str(ctx.paths.project_root)
    os.environ["SCHOLARPAGE_BIB"] = str(ctx.paths.bib_path)
    os.environ["SCHOLARPAGE_PROFILE"] = str(ctx.paths.profile_path)
    os.environ["SCHOLARPAGE_OUT"] = str(ctx.paths.output_dir)

    uvicorn.run(APP_FACTORY, factory=True, host=args.host, port=args.port, reload=args.reload)
    return 0
