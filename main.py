# main.py

"""Entry point for the landingkit generator (headless CLI)."""

import argparse
import asyncio
import logging
import sys

from landingkit.config.logging_config import setup_logging
from landingkit.config.settings import Settings
from landingkit.models.content import AUDIENCES, LANGUAGES, GenerationOptions

logger = logging.getLogger("landingkit.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    configured = ", ".join(
        s["id"] for s in Settings.available_provider_specs()
    )

    parser = argparse.ArgumentParser(
        prog="landingkit",
        description="Generate landing page content for a product.",
        epilog=f"Configured search providers: {configured}",
    )
    parser.add_argument(
        "target",
        help="Product URL or free-text product name.",
    )
    parser.add_argument(
        "-a",
        "--audience",
        choices=AUDIENCES,
        default="america",
        help="Target audience (default: america).",
    )
    parser.add_argument(
        "-l",
        "--language",
        choices=LANGUAGES,
        default="en",
        help="Copy language (default: en).",
    )
    parser.add_argument(
        "--no-upsells",
        action="store_false",
        dest="include_upsells",
        help="Leave out upsell offers.",
    )
    parser.add_argument(
        "--no-reviews",
        action="store_false",
        dest="include_reviews",
        help="Leave out customer reviews.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_dir",
        help="Custom output directory (default: results/).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for generated sample data and social proof.",
    )
    return parser


def main() -> None:
    log_file = setup_logging()
    logger.info("landingkit starting, log file: %s", log_file)

    args = _build_parser().parse_args()
    options = GenerationOptions(
        target_audience=args.audience,
        language=args.language,
        include_upsells=args.include_upsells,
        include_reviews=args.include_reviews,
    )

    from landingkit.cli.runner import cli_generate

    try:
        exit_code = asyncio.run(
            cli_generate(
                target=args.target,
                options=options,
                output_format=args.output_format,
                output_dir=args.output_dir,
                seed=args.seed,
            )
        )
    except Exception:
        logger.critical("Fatal error during generation", exc_info=True)
        raise
    finally:
        logger.info("landingkit shutting down")
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
