from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from scholarpage.core.errors import PublicationSourceError
from scholarpage.domain.models.publication import Publication
from scholarpage.infrastructure.importers.bibtex_importer import (
    count_entry_markers,
    parse_publications,
    year_number,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PublicationSummary:
    entries_seen: int
    publications: int
    entries_dropped: int
    first_year: int | None
    latest_year: int | None
    venues: dict[str, int] = field(default_factory=dict)


class PublicationService:
    def read_bibliography(self, bib_path: Path) -> str:
        path = bib_path.expanduser().resolve()
        if not path.exists() or not path.is_file():
            raise PublicationSourceError(f"Bibliography file not found: {path}")
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PublicationSourceError(f"Bibliography is not valid UTF-8: {path}") from exc

    def load(self, bib_path: Path) -> list[Publication]:
        return self.parse(self.read_bibliography(bib_path), source=str(bib_path))

    def parse(self, raw: str, source: str = "<memory>") -> list[Publication]:
        publications = parse_publications(raw)

        dropped = count_entry_markers(raw) - len(publications)
        logger.info("Parsed %d publications from %s", len(publications), source)
        if dropped > 0:
            logger.debug("Skipped %d entries without an identifier or title", dropped)
        return publications

    def summarize(self, publications: list[Publication], entries_seen: int | None = None) -> PublicationSummary:
        seen = len(publications) if entries_seen is None else entries_seen
        years = [year_number(p.year) for p in publications if year_number(p.year) > 0]
        venues = Counter(p.venue for p in publications)
        return PublicationSummary(
            entries_seen=seen,
            publications=len(publications),
            entries_dropped=max(seen - len(publications), 0),
            first_year=min(years) if years else None,
            latest_year=max(years) if years else None,
            venues=dict(venues.most_common()),
        )
