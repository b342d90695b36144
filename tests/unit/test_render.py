from scholarpage.application.services.profile_service import FocusArea, SiteProfile
from scholarpage.domain.models.publication import Publication
from scholarpage.web.render import render_publication, render_site


def test_render_publication_links_without_opener_access() -> None:
    html = render_publication(
        Publication(id="x", title="Paper", author="A. Author", year="2024", venue="Venue", url="https://example.org/p")
    )

    assert "<h3>Paper</h3>" in html
    assert '<span class="year">2024</span>' in html
    assert '<span class="venue">Venue</span>' in html
    assert 'href="https://example.org/p"' in html
    assert 'rel="noopener noreferrer"' in html
    assert 'target="_blank"' in html


def test_render_publication_without_url_has_no_link() -> None:
    html = render_publication(Publication(id="x", title="Paper"))

    assert "<a " not in html
    assert "Preprint" in html


def test_render_site_escapes_text_and_keeps_order() -> None:
    profile = SiteProfile(name="Dr <Script>", focus_areas=[FocusArea(title="Signals", description="ECG")])
    publications = [
        Publication(id="new", title="Newer & Better", year="2024"),
        Publication(id="old", title="Older", year="2020"),
    ]

    page = render_site(profile, publications)

    assert page.startswith("<!doctype html>")
    assert "Dr &lt;Script&gt;" in page
    assert "<Script>" not in page
    assert "Newer &amp; Better" in page
    assert page.index("Newer &amp; Better") < page.index("Older")
    assert 'id="about"' in page
    assert 'id="publications"' in page
    assert "Signals" in page


def test_render_site_without_publications() -> None:
    page = render_site(SiteProfile(), [])

    assert "No publications listed yet." in page
