from __future__ import annotations

import re

# Ordered: braced forms must be replaced before their unbraced variants, and
# everything here runs before the generic brace stripping below.
_ACCENT_REPLACEMENTS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r'\\?\{\\"\{a\}\}'), "ä"),
    (re.compile(r'\\?\{\\"\{o\}\}'), "ö"),
    (re.compile(r'\\?\{\\"\{u\}\}'), "ü"),
    (re.compile(r'\\?\{\\"\{A\}\}'), "Ä"),
    (re.compile(r'\\?\{\\"\{O\}\}'), "Ö"),
    (re.compile(r'\\?\{\\"\{U\}\}'), "Ü"),
    (re.compile(r'\\"\{a\}'), "ä"),
    (re.compile(r'\\"\{o\}'), "ö"),
    (re.compile(r'\\"\{u\}'), "ü"),
    (re.compile(r'\\"\{A\}'), "Ä"),
    (re.compile(r'\\"\{O\}'), "Ö"),
    (re.compile(r'\\"\{U\}'), "Ü"),
    (re.compile(r"\\ss"), "ß"),
    (re.compile(r"\{\\c\{c\}\}"), "ç"),
    (re.compile(r"\{\\c\{C\}\}"), "Ç"),
    (re.compile(r"\\c\{c\}"), "ç"),
    (re.compile(r"\\c\{C\}"), "Ç"),
    (re.compile(r"\\'\{e\}"), "é"),
    (re.compile(r"\\'\{a\}"), "á"),
    (re.compile(r"\\'e"), "é"),
    (re.compile(r"--"), "\u2013"),
]
_BRACES_RE = re.compile(r"[{}]")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_latex(text: str | None) -> str:
    """Turn a raw BibTeX field value into display text.

    One enclosing brace pair is removed, the known accent escapes become
    precomposed characters, ``--`` becomes an en dash, any remaining braces
    are dropped and whitespace is collapsed. Escapes outside the table pass
    through with only their braces removed.
    """
    if not text:
        return ""
    clean = text

    if clean.startswith("{") and clean.endswith("}"):
        clean = clean[1:-1]

    for pattern, replacement in _ACCENT_REPLACEMENTS:
        clean = pattern.sub(replacement, clean)

    clean = _BRACES_RE.sub("", clean)
    return _WHITESPACE_RE.sub(" ", clean).strip()
