#!/usr/bin/env python3
"""
Basic get-details usage example.

Fetches live metadata from the public registries, so it needs network access.
Run with: python examples/basic_usage.py
"""

import asyncio
import logging

from getdetails import AsyncGetDetailsClient, ConfigError, GetDetailsClient, configure_logging
from getdetails.html import HtmlDocument

configure_logging(level=logging.INFO)

print("=== get-details Basic Usage Example ===\n")

# 1. Blocking client: bare version and a template
print("1. Blocking reports...")
with GetDetailsClient() as client:
    print(f"   left-pad: {client.report('left-pad')}")
    print(f"   flask:    {client.report('flask', source='pypi', format='%name %version (%license)')}")

# 2. Configuration errors are raised before any request
print("\n2. Unsupported source...")
try:
    with GetDetailsClient() as client:
        client.report("pkg", source="svn")
except ConfigError as e:
    print(f"   Caught {type(e).__name__}: {e}")

# 3. Hydrating a page
print("\n3. Hydrating HTML...")
page = HtmlDocument(
    """
    <p>left-pad <span data-get-details="left-pad">...</span></p>
    <p data-get-details="pallets/flask,,github,{%name %version, %stars stars}">...</p>
    <script data-get-details="react"></script>
    <footer>React <span id="package_version"></span></footer>
    """
)


async def hydrate() -> None:
    async with AsyncGetDetailsClient(document=page) as client:
        await client.hydrate()


asyncio.run(hydrate())
print(page)
