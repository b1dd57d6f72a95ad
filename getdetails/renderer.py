"""
Report rendering.

A report is either the bare version string or a template in which
``%``-prefixed placeholders are replaced by metadata fields. Templates mix
literal punctuation with placeholders that may resolve to nothing (a GitHub
placeholder used against npm), so the expanded text is cleaned up until it
reads as prose rather than ``", , (License: )"``.
"""

import re
from collections.abc import Callable
from datetime import date

from getdetails.types.metadata import PackageMetadata

COPYRIGHT_SIGN = "©"


def _count(value: int | None) -> str:
    return "" if value is None else str(value)


PLACEHOLDERS: dict[str, Callable[[PackageMetadata, date], str]] = {
    "%year": lambda m, today: str(today.year),
    "%copy": lambda m, today: COPYRIGHT_SIGN,
    "%name": lambda m, today: m.name,
    "%version": lambda m, today: m.version,
    "%description": lambda m, today: m.description,
    "%homepage": lambda m, today: m.homepage,
    "%author": lambda m, today: m.author,
    "%license": lambda m, today: m.license,
    "%last-update": lambda m, today: m.last_update,
    "%stars": lambda m, today: _count(m.stars),
    "%forks": lambda m, today: _count(m.forks),
    "%language": lambda m, today: m.language,
    "%repository": lambda m, today: m.repository_url,
    "%maintainers": lambda m, today: m.maintainers,
    "%downloads": lambda m, today: _count(m.downloads.last_month),
    "%release-date": lambda m, today: m.release_date,
    "%release-notes": lambda m, today: m.release_notes,
    "%owner": lambda m, today: m.owner,
    "%requires": lambda m, today: m.requires_runtime,
}

# Longest first so that no token can shadow a longer one sharing its prefix
_PLACEHOLDER_RE = re.compile(
    "|".join(re.escape(token) for token in sorted(PLACEHOLDERS, key=len, reverse=True)),
    re.IGNORECASE,
)

_CLEANUP_STEPS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\s+"), " "),
    (re.compile(r"\s+,"), ","),
    (re.compile(r",+"), ","),
]
_EDGE_COMMAS = re.compile(r"^,+|,+$")
_EMPTY_PARENS = re.compile(r"\(\s*\)")


def render_report(
    metadata: PackageMetadata | None,
    template: str | None = None,
    today: date | None = None,
) -> str:
    """
    Render metadata through an optional placeholder template.

    Args:
        metadata: Adapter output; None (a failed lookup) renders like empty metadata
        template: Template such as ``"%name %version (%license)"``
        today: Date used for ``%year`` (default: today)

    Returns:
        The bare version when no template is given, else the cleaned expansion
    """
    metadata = metadata or PackageMetadata()
    if not template:
        return metadata.version or ""

    today = today or date.today()
    expanded = _PLACEHOLDER_RE.sub(
        lambda match: PLACEHOLDERS[match.group(0).lower()](metadata, today) or "",
        template,
    )
    return cleanup(expanded)


def cleanup(text: str) -> str:
    """
    Normalize whitespace and punctuation left behind by empty substitutions.

    Each pass collapses whitespace, drops whitespace before commas, collapses
    comma runs, trims, strips edge commas and removes empty ``()``. Passes
    repeat until the text is stable.

    Examples:
        >>> cleanup("flask 2.3.0 ()")
        'flask 2.3.0'
        >>> cleanup(", , ()")
        ''
    """
    previous = None
    while text != previous:
        previous = text
        for pattern, replacement in _CLEANUP_STEPS:
            text = pattern.sub(replacement, text)
        text = _EDGE_COMMAS.sub("", text.strip())
        text = _EMPTY_PARENS.sub("", text)
    return text
