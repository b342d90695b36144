from __future__ import annotations

from dataclasses import dataclass

PUBLICATION_TYPE = "article"


@dataclass(frozen=True, slots=True)
class Publication:
    id: str
    title: str
    author: str = ""
    year: str = ""
    month: str = ""
    venue: str = "Preprint"
    url: str = ""
    type: str = PUBLICATION_TYPE
