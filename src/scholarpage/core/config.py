from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SitePaths:
    project_root: Path
    bib_path: Path
    profile_path: Path
    output_dir: Path


DEFAULT_BIB_FILENAME = "publications.bib"
DEFAULT_PROFILE_FILENAME = "profile.json"
DEFAULT_OUTPUT_DIRNAME = "site"


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if not raw:
        return None
    return Path(raw).expanduser().resolve()


def load_paths(project_root: Path | None = None) -> SitePaths:
    root = (project_root or _env_path("SCHOLARPAGE_ROOT") or Path.cwd()).expanduser().resolve()

    return SitePaths(
        project_root=root,
        bib_path=_env_path("SCHOLARPAGE_BIB") or root / DEFAULT_BIB_FILENAME,
        profile_path=_env_path("SCHOLARPAGE_PROFILE") or root / DEFAULT_PROFILE_FILENAME,
        output_dir=_env_path("SCHOLARPAGE_OUT") or root / DEFAULT_OUTPUT_DIRNAME,
    )
