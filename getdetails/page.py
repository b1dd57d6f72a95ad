"""
The narrow document capability the processing core depends on.

Anything that can query elements by CSS selector, replace an element's
content and attach an opaque "already written" marker can be hydrated:
a browser bridge or the BeautifulSoup document in ``getdetails.html``.
"""

from typing import Protocol, runtime_checkable

# Tags that never render their content; such elements always resolve targets by selector
NON_RENDERING_TAGS = frozenset({"script", "template", "noscript", "style", "link", "meta"})


@runtime_checkable
class Element(Protocol):
    """A markup element."""

    @property
    def tag_name(self) -> str: ...

    def get_attribute(self, name: str) -> str | None: ...


@runtime_checkable
class Document(Protocol):
    """A page whose elements can be queried, written and marked."""

    def query_all(self, selector: str) -> list[Element]:
        """Return every element matching a CSS selector (group selectors allowed)."""
        ...

    def write(self, element: Element, content: str) -> None:
        """Replace the element's content with the given markup."""
        ...

    def is_marked(self, element: Element) -> bool:
        """Whether a report was already written to the element."""
        ...

    def mark(self, element: Element) -> None:
        """Record that a report was written to the element."""
        ...


def renders_content(element: Element) -> bool:
    """False for script-like tags whose content is never displayed."""
    return element.tag_name.lower() not in NON_RENDERING_TAGS
