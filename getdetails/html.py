"""
BeautifulSoup-backed document for hydrating static HTML.

Example:
    ```python
    from getdetails.html import hydrate_html

    html = '<span data-get-details="left-pad"></span>'
    print(hydrate_html(html))  # <span data-get-details="left-pad">1.3.0</span>
    ```
"""

import asyncio

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from getdetails.async_client import AsyncGetDetailsClient
from getdetails.config import Settings
from getdetails.exceptions import ConfigError


class HtmlElement:
    """Element view over a BeautifulSoup tag."""

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    @property
    def tag_name(self) -> str:
        return self.tag.name

    def get_attribute(self, name: str) -> str | None:
        value = self.tag.get(name)
        if isinstance(value, list):
            # multi-valued attributes such as class
            return " ".join(value)
        return value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HtmlElement) and other.tag is self.tag

    def __hash__(self) -> int:
        return id(self.tag)

    def __repr__(self) -> str:
        return f"HtmlElement({self.tag.name!r})"


class HtmlDocument:
    """Document over a parsed HTML string; markers are kept outside the tree."""

    def __init__(self, html: str, parser: str = "html.parser") -> None:
        self.soup = BeautifulSoup(html, parser)
        self._parser = parser
        self._marked: dict[int, Tag] = {}

    def query_all(self, selector: str) -> list[HtmlElement]:
        """
        Raises:
            ConfigError: If the selector is not valid CSS
        """
        try:
            tags = self.soup.select(selector)
        except SelectorSyntaxError as e:
            raise ConfigError(f"Invalid target selector {selector!r}: {e}") from e
        return [HtmlElement(tag) for tag in tags]

    def write(self, element: HtmlElement, content: str) -> None:
        element.tag.clear()
        fragment = BeautifulSoup(content, self._parser)
        for node in list(fragment.contents):
            element.tag.append(node.extract())

    def is_marked(self, element: HtmlElement) -> bool:
        return self._marked.get(id(element.tag)) is element.tag

    def mark(self, element: HtmlElement) -> None:
        self._marked[id(element.tag)] = element.tag

    def __str__(self) -> str:
        return str(self.soup)


async def hydrate_html_async(html: str, settings: Settings | None = None) -> str:
    """Fetch and write every report on an HTML page, returning the new markup."""
    document = HtmlDocument(html)
    async with AsyncGetDetailsClient(settings=settings, document=document) as client:
        await client.hydrate()
    return str(document)


def hydrate_html(html: str, settings: Settings | None = None) -> str:
    """Blocking wrapper around hydrate_html_async()."""
    return asyncio.run(hydrate_html_async(html, settings))
