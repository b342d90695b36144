from pathlib import Path

import pytest

from scholarpage.application.services.publication_service import PublicationService
from scholarpage.core.errors import PublicationSourceError

BIB = """
@article{one, title = {First Paper}, journal = {Journal A}, year = {2021}}
@inproceedings{two, title = {Second Paper}, booktitle = {Conf B}, year = {2023}}
@misc{three, title = {Third Paper}, year = {2019}}
@misc{dropped, author = {Nobody}}
"""


def test_load_reads_and_parses_bibliography(tmp_path: Path) -> None:
    bib_path = tmp_path / "publications.bib"
    bib_path.write_text(BIB, encoding="utf-8")

    publications = PublicationService().load(bib_path)

    assert [p.id for p in publications] == ["two", "one", "three"]


def test_load_missing_file_raises_source_error(tmp_path: Path) -> None:
    with pytest.raises(PublicationSourceError):
        PublicationService().load(tmp_path / "missing.bib")


def test_load_rejects_non_utf8(tmp_path: Path) -> None:
    bib_path = tmp_path / "latin1.bib"
    bib_path.write_bytes("@article{x, title = {Caf\xe9}}".encode("latin-1"))

    with pytest.raises(PublicationSourceError):
        PublicationService().load(bib_path)


def test_summarize_counts_years_and_venues() -> None:
    service = PublicationService()
    publications = service.parse(BIB)

    summary = service.summarize(publications, entries_seen=4)

    assert summary.entries_seen == 4
    assert summary.publications == 3
    assert summary.entries_dropped == 1
    assert summary.first_year == 2019
    assert summary.latest_year == 2023
    assert summary.venues == {"Conf B": 1, "Journal A": 1, "Preprint": 1}


def test_summarize_empty_list() -> None:
    summary = PublicationService().summarize([])

    assert summary.publications == 0
    assert summary.first_year is None
    assert summary.latest_year is None
    assert summary.venues == {}
