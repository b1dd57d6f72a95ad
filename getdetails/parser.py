"""
Trigger attribute parser.

Grammar (whitespace around fields is insignificant)::

    <package>[,<target>[,<source>[,<format>]]]
    <package>[,<target>[,<source>]],{<format>}

The brace form is authoritative: when a ``{...}`` segment is present, only the
text before its opening brace is split into package, target and source. The
trailing comma field is the legacy spelling of the same format and takes
everything after the third comma, so it may itself contain commas.
"""

import re

from getdetails.exceptions import ConfigError
from getdetails.types.request import RequestDescriptor

DEFAULT_SOURCE = "npm"

_BRACE_FORMAT = re.compile(r"{([^}]*)}")


def parse_attribute(value: str | None) -> RequestDescriptor:
    """
    Parse a trigger attribute value into a RequestDescriptor.

    Args:
        value: Raw attribute value, e.g. ``"flask,,pypi,{%name %version}"``

    Returns:
        RequestDescriptor with empty target/format normalized to None

    Raises:
        ConfigError: If the package name is missing
    """
    if not value:
        raise ConfigError("Package name is required in the trigger attribute")

    match = _BRACE_FORMAT.search(value)
    if match:
        fields = _split(value[: match.start()])
        template = match.group(1).strip()
    else:
        fields = _split(value, maxsplit=3)
        template = fields[3]

    package_name, target, source = fields[0], fields[1], fields[2]
    if not package_name:
        raise ConfigError("Package name is required in the trigger attribute")

    return RequestDescriptor(
        package_name=package_name,
        target_selector=target or None,
        source=source or DEFAULT_SOURCE,
        format_template=template or None,
    )


def _split(text: str, maxsplit: int = -1) -> list[str]:
    parts = [part.strip() for part in text.split(",", maxsplit)]
    return parts + [""] * (4 - len(parts))
