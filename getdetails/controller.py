"""Page-level hydration of every trigger element."""

import asyncio

from getdetails.config import Settings
from getdetails.logging import get_logger
from getdetails.page import Document, Element
from getdetails.processor import ElementProcessor
from getdetails.types.request import ProcessResult

logger = get_logger("page")


class PageController:
    """
    Discovers trigger elements once and processes them concurrently.

    The element snapshot is taken on first use and kept for the controller's
    lifetime; create a new controller for a new page load.
    """

    def __init__(
        self,
        document: Document,
        processor: ElementProcessor,
        settings: Settings | None = None,
    ) -> None:
        self.document = document
        self.processor = processor
        self.settings = settings or Settings()
        self._elements: list[Element] | None = None

    @property
    def elements(self) -> list[Element]:
        """Trigger elements found on the first access."""
        if self._elements is None:
            self._elements = list(self.document.query_all(f"[{self.settings.attribute}]"))
        return self._elements

    async def hydrate(self) -> list[ProcessResult | None]:
        """
        Process every trigger element and wait for all of them.

        Returns:
            One entry per element, in document order; None for an element
            whose pipeline failed
        """
        elements = self.elements
        if not elements:
            return []

        outcomes = await asyncio.gather(
            *(self.processor.process(element) for element in elements),
            return_exceptions=True,
        )

        results: list[ProcessResult | None] = []
        for element, outcome in zip(elements, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    f"Error during element initialization ({element.tag_name}): {outcome!r}"
                )
                results.append(None)
            else:
                results.append(outcome)

        written = sum(len(r.written) for r in results if r is not None)
        failed = sum(1 for r in results if r is None)
        logger.info(
            f"Hydrated {len(elements)} elements: {written} targets written, {failed} failed"
        )
        return results
