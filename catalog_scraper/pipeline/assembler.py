# catalog_scraper/pipeline/assembler.py
"""
Pagination loop that turns page-by-page extraction into one catalog.

The loop stops on the first of:

* the catalog reaching ``max_products`` (STOPPED_FULL),
* a page returning no products at all (STOPPED_EMPTY_PAGE),
* a page contributing no new URL once the catalog has content (STOPPED_NO_NEW),
* a page failing to load (FAILED, raised as CatalogAssemblyError).

The two "stopped" heuristics cannot tell the real end of the catalog apart
from selectors that no longer match the site's layout. Both return a
short catalog without any error.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, List, Protocol, Sequence, Set

from ..exceptions import CatalogAssemblyError, PageLoadError
from ..models import ProductRecord

logger = logging.getLogger(__name__)


class AssemblyState(str, Enum):
    RUNNING = "running"
    STOPPED_FULL = "stopped_full"
    STOPPED_EMPTY_PAGE = "stopped_empty_page"
    STOPPED_NO_NEW = "stopped_no_new"
    FAILED = "failed"


class ProductSource(Protocol):
    def extract(self, page_index: int) -> Awaitable[List[ProductRecord]]:
        ...


@dataclass(frozen=True)
class PageOutcome:
    added: int
    state: AssemblyState


@dataclass
class AssemblyResult:
    products: List[ProductRecord] = field(default_factory=list)
    state: AssemblyState = AssemblyState.RUNNING
    pages_fetched: int = 0


def absorb_page(catalog: List[ProductRecord], seen: Set[str], records: Sequence[ProductRecord],
                max_products: int) -> PageOutcome:
    """
    Appends the new records of one page to `catalog` in page order and
    reports the state the run moves to. Mutates `catalog` and `seen`.
    """
    if not records:
        return PageOutcome(0, AssemblyState.STOPPED_EMPTY_PAGE)

    added = 0
    for record in records:
        if len(catalog) >= max_products:
            break
        if not record.url or record.url in seen:
            continue
        seen.add(record.url)
        catalog.append(record)
        added += 1

    if added == 0 and catalog:
        return PageOutcome(added, AssemblyState.STOPPED_NO_NEW)
    if len(catalog) >= max_products:
        return PageOutcome(added, AssemblyState.STOPPED_FULL)
    return PageOutcome(added, AssemblyState.RUNNING)


class CatalogAssembler:
    """Drives a ProductSource page by page, strictly sequentially."""

    def __init__(self, source: ProductSource):
        self.source = source

    async def assemble(self, max_products: int) -> AssemblyResult:
        if max_products < 0:
            raise ValueError(f"max_products must be >= 0, got {max_products}")

        catalog: List[ProductRecord] = []
        seen: Set[str] = set()
        page = 1
        pages_fetched = 0
        state = AssemblyState.RUNNING if max_products > 0 else AssemblyState.STOPPED_FULL

        while state is AssemblyState.RUNNING:
            try:
                records = await self.source.extract(page)
            except PageLoadError as e:
                logger.error("Aborting run on page %d, discarding %d collected products.", page, len(catalog))
                raise CatalogAssemblyError(page, len(catalog)) from e
            pages_fetched += 1

            outcome = absorb_page(catalog, seen, records, max_products)
            state = outcome.state
            logger.debug("Page %d: %d records, %d new, catalog size %d.",
                         page, len(records), outcome.added, len(catalog))

            if state is AssemblyState.STOPPED_EMPTY_PAGE:
                logger.warning("No products extracted from page %d, might be layout change or end of products", page)
            elif state is AssemblyState.STOPPED_NO_NEW:
                logger.info("No new products found on page %d, stopping", page)
            page += 1

        logger.info("Catalog assembled: %d products from %d pages (%s).", len(catalog), pages_fetched, state.value)
        return AssemblyResult(products=catalog, state=state, pages_fetched=pages_fetched)
