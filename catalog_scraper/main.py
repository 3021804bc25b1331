# catalog_scraper/main.py
import asyncio
import logging
from pathlib import Path
from typing import Optional

from . import config
from .delegates import BrowserSession, OutputDelegate, PageExtractor, STRATEGIES
from .pipeline import AssemblyResult, CatalogAssembler

logger = logging.getLogger(__name__)

async def main(output_json: bool = True,
               max_products: int = config.MAX_PRODUCTS,
               strategy: str = "script",
               output_path: Optional[Path] = None,
               timeout: Optional[float] = None,
               headless: bool = True,
               output: Optional[OutputDelegate] = None) -> AssemblyResult:
    """
    Opens one browser session, assembles the catalog and prints it.
    Any page failure propagates; nothing is printed in that case.
    """
    output = output or OutputDelegate()

    async with BrowserSession(
        user_agent=config.USER_AGENT,
        viewport=config.VIEWPORT,
        headless=headless,
    ) as session:
        extractor = PageExtractor(session, strategy=STRATEGIES[strategy]())
        assembler = CatalogAssembler(extractor)
        logger.info("Assembling up to %d products with the '%s' extraction strategy.", max_products, strategy)
        result = await asyncio.wait_for(assembler.assemble(max_products), timeout)

    output.emit(result.products, as_json=output_json, max_products=max_products)
    if output_path is not None:
        output.save_catalog_json(result.products, output_path)

    logger.info("Scrape finished with %d products.", len(result.products))
    return result
