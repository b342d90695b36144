from __future__ import annotations

import html

from scholarpage.application.services.profile_service import SiteProfile
from scholarpage.domain.models.publication import Publication

_PAGE_STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; background: #020617; color: #e2e8f0; }
header { position: sticky; top: 0; display: flex; justify-content: space-between; padding: 1rem 1.5rem;
  background: rgba(2, 6, 23, 0.85); border-bottom: 1px solid rgba(255, 255, 255, 0.05); }
header a { color: #e2e8f0; text-decoration: none; margin-left: 1rem; }
section { max-width: 64rem; margin: 0 auto; padding: 4rem 1.5rem; }
.hero h1 { font-size: 2.5rem; margin: 0.5rem 0; }
.role { color: #94a3b8; }
.focus { display: grid; grid-template-columns: repeat(auto-fit, minmax(12rem, 1fr)); gap: 1rem; }
.card, .publication { border: 1px solid rgba(255, 255, 255, 0.06); border-radius: 1rem; padding: 1.25rem;
  background: rgba(255, 255, 255, 0.04); }
.publication { display: flex; gap: 1.5rem; margin-bottom: 1.5rem; }
.publication .body { flex: 1; }
.authors { color: #94a3b8; font-size: 0.9rem; margin-top: 0.5rem; }
.year { border: 1px solid rgba(14, 165, 233, 0.2); color: #7dd3fc; border-radius: 0.4rem; padding: 0.1rem 0.5rem;
  font-size: 0.75rem; }
.venue { color: #cbd5e1; font-size: 0.9rem; margin-left: 0.5rem; }
.link { color: #94a3b8; }
"""


def _e(value: str) -> str:
    return html.escape(value, quote=True)


def render_publication(publication: Publication) -> str:
    parts = [
        '<article class="publication">',
        '<div class="body">',
        f"<h3>{_e(publication.title)}</h3>",
    ]
    if publication.author:
        parts.append(f'<div class="authors">{_e(publication.author)}</div>')
    meta = []
    if publication.year:
        meta.append(f'<span class="year">{_e(publication.year)}</span>')
    meta.append(f'<span class="venue">{_e(publication.venue)}</span>')
    parts.append(f'<div class="meta">{"".join(meta)}</div>')
    parts.append("</div>")
    if publication.url:
        # The linked page must not get a window.opener handle on this one.
        parts.append(
            f'<a class="link" href="{_e(publication.url)}" target="_blank" '
            f'rel="noopener noreferrer" aria-label="Open publication">&#8599;</a>'
        )
    parts.append("</article>")
    return "".join(parts)


def _render_nav(profile: SiteProfile) -> str:
    links = "".join(f'<a href="{_e(item.href)}">{_e(item.label)}</a>' for item in profile.nav)
    return f'<header><a href="#">{_e(profile.name)}</a><nav>{links}</nav></header>'


def _render_hero(profile: SiteProfile) -> str:
    tagline = f"<p>{_e(profile.tagline)}</p>" if profile.tagline else ""
    return (
        '<section class="hero" id="top">'
        f'<p class="role">{_e(profile.role)}</p>'
        f"<h1>{_e(profile.headline)}</h1>"
        f"{tagline}"
        '<a href="#publications">View publications</a>'
        "</section>"
    )


def _render_about(profile: SiteProfile) -> str:
    paragraphs = "".join(f"<p>{_e(p)}</p>" for p in profile.about)
    if profile.affiliations:
        paragraphs += "<p>" + " &middot; ".join(_e(a) for a in profile.affiliations) + "</p>"
    cards = "".join(
        f'<div class="card"><h3>{_e(area.title)}</h3><p>{_e(area.description)}</p></div>'
        for area in profile.focus_areas
    )
    focus = f'<div class="focus">{cards}</div>' if cards else ""
    return f'<section id="about"><h2>About</h2>{paragraphs}{focus}</section>'


def _render_publications(profile: SiteProfile, publications: list[Publication]) -> str:
    items = "".join(render_publication(p) for p in publications)
    if not items:
        items = '<p class="empty">No publications listed yet.</p>'
    return (
        '<section id="publications">'
        "<h2>Publications</h2>"
        f"<p>{_e(profile.publications_intro)}</p>"
        f"{items}"
        "</section>"
    )


def _render_contact(profile: SiteProfile) -> str:
    links = "".join(
        f'<li><a href="{_e(link.href)}" target="_blank" rel="noopener noreferrer">{_e(link.label)}</a></li>'
        for link in profile.contact
    )
    return f'<section id="contact"><h2>Contact</h2><ul>{links}</ul></section>'


def render_site(profile: SiteProfile, publications: list[Publication]) -> str:
    """Render the whole single-page profile site as one HTML document."""
    body = "".join(
        [
            _render_nav(profile),
            _render_hero(profile),
            _render_about(profile),
            _render_publications(profile, publications),
            _render_contact(profile),
        ]
    )
    return (
        "<!doctype html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{_e(profile.name)}</title>"
        f"<style>{_PAGE_STYLE}</style>"
        f"</head><body>{body}</body></html>\n"
    )
