"""
Per-element pipeline: parse, route, fetch, render, write.

Targets are marked once written, so two trigger elements resolving to the
same target (or one colliding with the default selector) write it once.
Tasks only yield at network calls, so the check-then-mark below cannot
interleave with another element's write.
"""

from getdetails.config import Settings
from getdetails.exceptions import GetDetailsError, NoTargetError
from getdetails.logging import get_logger
from getdetails.page import Document, Element, renders_content
from getdetails.parser import parse_attribute
from getdetails.renderer import render_report
from getdetails.router import SourceRouter
from getdetails.types.request import ProcessResult, RequestDescriptor

logger = get_logger("page")


class ElementProcessor:
    """Runs the report pipeline for one element at a time."""

    def __init__(
        self,
        document: Document,
        router: SourceRouter,
        settings: Settings | None = None,
    ) -> None:
        self.document = document
        self.router = router
        self.settings = settings or Settings()

    def describe(
        self, element: Element | None, params: RequestDescriptor | None = None
    ) -> RequestDescriptor:
        """
        Build the descriptor for an element, or take the explicit override.

        Raises:
            ConfigError: If neither yields a package name
        """
        if params is not None and params.package_name.strip():
            return params
        if element is None:
            return parse_attribute(None)
        return parse_attribute(element.get_attribute(self.settings.attribute))

    def resolve_targets(
        self, element: Element | None, descriptor: RequestDescriptor
    ) -> list[Element]:
        """
        Resolve the elements that receive the report.

        A rendering element without an explicit target is its own target;
        otherwise the descriptor's selector (or the default selector) is
        queried and every match is a target.

        Raises:
            NoTargetError: If nothing matched and settings.strict_targets is set
        """
        if element is not None and renders_content(element) and not descriptor.target_selector:
            return [element]

        selector = descriptor.target_selector or self.settings.default_selector
        targets = self.document.query_all(selector)
        if not targets:
            if self.settings.strict_targets:
                raise NoTargetError(selector)
            logger.info(f"No target elements found for {selector!r}; skipping")
        return targets

    async def run(
        self,
        element: Element | None,
        params: RequestDescriptor | None = None,
    ) -> ProcessResult:
        """
        Run the pipeline, raising any configuration or target error.

        Raises:
            ConfigError: On a missing package name or unsupported source
            NoTargetError: When target resolution finds nothing (strict mode)
        """
        descriptor = self.describe(element, params)
        targets = self.resolve_targets(element, descriptor)
        # Fail on an unknown source before any request is made
        self.router.resolve(descriptor.source)
        if not targets:
            return ProcessResult(descriptor, None, "", [])

        metadata = await self.router.route(descriptor.source, descriptor.package_name)
        report = render_report(metadata, descriptor.format_template)

        written: list[Element] = []
        if metadata is None:
            logger.warning(
                f"No {descriptor.source} data for {descriptor.package_name!r}; "
                "leaving targets untouched"
            )
            return ProcessResult(descriptor, metadata, report, written)

        for target in targets:
            if self.document.is_marked(target):
                continue
            self.document.write(target, report)
            self.document.mark(target)
            written.append(target)

        return ProcessResult(descriptor, metadata, report, written)

    async def process(
        self,
        element: Element | None,
        params: RequestDescriptor | None = None,
    ) -> ProcessResult | None:
        """Run the pipeline, logging failures instead of raising them."""
        try:
            return await self.run(element, params)
        except GetDetailsError as e:
            logger.error(f"Error processing element: {e}")
            return None
