#!/usr/bin/env python3
"""
docsearch CLI - paginated search over a remote documentation endpoint.

PAGINATION:
    --page N                            Page to return (default: 1)
    --per-page N                        Results per page (default: 10)

ENDPOINT:
    --base-url URL                      Search host (default: $DOCS_SEARCH_BASE_URL)
    --timeout SEC                       Request timeout in seconds

OUTPUT:
    --raw                               Print the {success, formattedText|error} envelope
    --verbose, -v                       Debug logging on stderr

EXAMPLES:
    python run.py "checkout ui extensions"
    python run.py --page 2 --per-page 5 "metafields"
    python run.py --raw --base-url http://localhost:8080 "webhooks"
"""

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

load_dotenv()

from docsearch.config import SearchConfig, configure_logging, validate_config
from docsearch.tools import search_docs


def parse_args():
    parser = argparse.ArgumentParser(
        description="docsearch: paginated documentation search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run.py "checkout ui extensions"
  python run.py --page 2 --per-page 5 "metafields"
        """
    )

    parser.add_argument(
        "query",
        nargs="*",
        help="Search query (or omit for interactive prompt)"
    )

    page_group = parser.add_argument_group("Pagination")
    page_group.add_argument(
        "--page",
        default=None,
        help="Page to return (default: 1)"
    )
    page_group.add_argument(
        "--per-page",
        default=None,
        help="Results per page (default: 10)"
    )

    endpoint_group = parser.add_argument_group("Endpoint")
    endpoint_group.add_argument(
        "--base-url",
        default=None,
        metavar="URL",
        help="Search host, e.g. https://shopify.dev"
    )
    endpoint_group.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SEC",
        help="Request timeout in seconds (default: 30)"
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--raw",
        action="store_true",
        help="Print the full result envelope as JSON"
    )
    output_group.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args()


def build_config(args) -> SearchConfig:
    """Build SearchConfig from CLI arguments."""
    config = SearchConfig.from_env()

    if args.base_url:
        config.base_url = args.base_url
    if args.timeout is not None:
        config.timeout_s = args.timeout

    return config


async def main() -> int:
    args = parse_args()
    configure_logging("DEBUG" if args.verbose else "WARNING")

    config = build_config(args)
    validate_config(config)

    if args.query:
        query = " ".join(args.query)
    else:
        query = input("Enter your search query: ").strip()
        if not query:
            print("No query provided. Exiting.")
            return 1

    result = await search_docs(
        query,
        {"page": args.page, "per_page": args.per_page},
        config=config,
    )

    if args.raw:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.success:
        print(result.formatted_text)
    else:
        print(f"[docsearch] Error: {result.error}", file=sys.stderr)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
