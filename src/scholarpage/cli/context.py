from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from scholarpage.core.config import SitePaths


@dataclass(slots=True)
class CLIContext:
    paths: SitePaths
    console: Console
