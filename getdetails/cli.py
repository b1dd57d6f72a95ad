"""get-details CLI: show package metadata or hydrate an HTML file."""

import asyncio
import json
import logging
import sys

import click

from getdetails import __version__
from getdetails.async_client import AsyncGetDetailsClient
from getdetails.config import Settings
from getdetails.exceptions import GetDetailsError
from getdetails.html import HtmlDocument
from getdetails.logging import configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log every registry request")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """get-details - live package metadata from npm, PyPI, GitHub and GitLab."""
    configure_logging(
        level=logging.INFO if verbose else logging.WARNING,
        http_level=logging.DEBUG if verbose else None,
    )
    try:
        ctx.obj = Settings.from_env()
    except GetDetailsError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("package")
@click.option("--source", "-s", default="npm", show_default=True, help="npm, pypi, github or gitlab")
@click.option("--format", "-f", "template", default=None, help='Template, e.g. "%name %version (%license)"')
@click.option("--json", "as_json", is_flag=True, help="Print the normalized metadata as JSON")
@click.pass_obj
def show(settings: Settings, package: str, source: str, template: str | None, as_json: bool):
    """Print the report (or metadata) for PACKAGE."""

    async def run():
        async with AsyncGetDetailsClient(settings=settings) as client:
            return await client.get_details(
                package, source=source, format=template, return_data_only=True
            )

    try:
        result = asyncio.run(run())
    except GetDetailsError as e:
        raise click.ClickException(str(e)) from e

    if result.metadata is None:
        click.echo(f"No {source} data for {package}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.metadata.to_dict(), indent=2))
    else:
        click.echo(result.report)


@main.command()
@click.argument("html_file", type=click.File("r", encoding="utf-8"))
@click.option("--output", "-o", type=click.File("w", encoding="utf-8"), default="-", help="Output file (default: stdout)")
@click.pass_obj
def hydrate(settings: Settings, html_file, output):
    """Fill every data-get-details element of HTML_FILE."""
    document = HtmlDocument(html_file.read())

    async def run():
        async with AsyncGetDetailsClient(settings=settings, document=document) as client:
            return await client.hydrate()

    results = asyncio.run(run())
    output.write(str(document))

    failed = sum(1 for r in results if r is None or not r.found)
    if failed:
        click.echo(f"{failed} of {len(results)} elements could not be filled", err=True)


if __name__ == "__main__":
    main()
