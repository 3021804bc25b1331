# catalog_scraper/pipeline/__init__.py

# This file makes the assembly loop directly available from the 'pipeline' package.
from .assembler import CatalogAssembler, AssemblyResult, AssemblyState, PageOutcome, absorb_page
