# run_scraper.py
import asyncio
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Import RichHandler here for centralized logging
from rich.logging import RichHandler
from rich.console import Console # Log console is bound to stderr so stdout carries only the catalog

# Import your main pipeline entry point
from catalog_scraper import config
from catalog_scraper.delegates import STRATEGIES
from catalog_scraper.main import main as run_scraper

logger = logging.getLogger("run_scraper")


def configure_logging(level: str = "INFO", log_file: Optional[Path] = config.LOG_FILE):
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)-8s - %(name)-25s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG) # Log all debug messages to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    rich_handler = RichHandler(
        console=Console(stderr=True),
        level=logging.DEBUG,
        show_time=True,
        show_level=True,
        show_path=False,
    )
    root_logger.addHandler(rich_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape a bounded, deduplicated product catalog from the storefront listing pages.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        '--json',
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Output results as JSON (default). Use --no-json for a numbered text listing."
    )
    parser.add_argument(
        '--max-products',
        type=int,
        default=config.MAX_PRODUCTS,
        help=f"Maximum number of unique products to collect (default: {config.MAX_PRODUCTS})."
    )
    parser.add_argument(
        '--strategy',
        choices=sorted(STRATEGIES),
        default="script",
        help="""How products are read from each rendered page.
    script: evaluate an extraction routine inside the browser
    html:   parse the rendered HTML with lxml
"""
    )
    parser.add_argument(
        '--output',
        type=Path,
        default=None,
        help="Also save the catalog as JSON to this file."
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help="Abort the whole run after this many seconds."
    )
    parser.add_argument(
        '--headful',
        action='store_true',
        help="Show the browser window instead of running headless."
    )
    parser.add_argument(
        '--log-level',
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Root log level for the console and the log file."
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_products < 0:
        parser.error("--max-products must be >= 0")

    configure_logging(args.log_level)

    logger.info("Catalog scrape starting: max_products=%d, strategy=%s", args.max_products, args.strategy)
    try:
        asyncio.run(run_scraper(
            output_json=args.json,
            max_products=args.max_products,
            strategy=args.strategy,
            output_path=args.output,
            timeout=args.timeout,
            headless=not args.headful,
        ))
    except KeyboardInterrupt:
        logger.warning("Scrape interrupted by user.")
        return 130
    except asyncio.TimeoutError:
        logger.critical("Scrape did not finish within %s seconds.", args.timeout)
        return 1
    except Exception as e:
        logger.critical("Failed to scrape products: %s", e, exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
