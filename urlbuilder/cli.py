"""Command line front end for the URL builder."""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, Tuple

from urlbuilder.core.config import settings
from urlbuilder.core.logging import setup_logging
from urlbuilder.core.metrics import increment_counter, set_gauge
from urlbuilder.io.schemas import BuildResult
from urlbuilder.io.urls import URLBuilder

logger = logging.getLogger(__name__)

def parse_param(raw: str) -> Tuple[str, str]:
    # split on the first "=" only; the value keeps any others
    key, sep, value = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected key=value, got {raw!r}")
    return key, value

def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlbuilder",
        description="Assemble a URL from protocol, host, port and query parameters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Bare authority
  python -m urlbuilder.cli --protocol http --host localhost --port 8000

  # With query parameters, printed as JSON
  python -m urlbuilder.cli --protocol https --host example.com --port 443 \\
    --param q=search --param page=2 --json
        """
    )

    parser.add_argument("--protocol", default="", help="URL scheme, e.g. http")
    parser.add_argument("--host", default="", help="Host name or address")
    parser.add_argument("--port", type=int, default=0, help="Port number")
    parser.add_argument("--param", "-p", dest="params", action="append", type=parse_param,
                        default=[], metavar="KEY=VALUE",
                        help="Query parameter; repeat for more. Later keys overwrite earlier ones")

    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    return parser

def builder_from_args(args: argparse.Namespace) -> URLBuilder:
    ub = URLBuilder().set_protocol(args.protocol).set_host(args.host).set_port(args.port)
    for key, value in args.params:
        ub.add_param(key, value)
    return ub

def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else settings.LOG_LEVEL)

    ub = builder_from_args(args)
    logger.debug("Builder state: %r", ub)
    url = ub.build()

    if args.json:
        print(BuildResult(url=url, params_count=len(ub.params())).model_dump_json())
    else:
        print(url)

    increment_counter("urls_built_total", {"source": "cli"})
    set_gauge("url_params", float(len(ub.params())))
    return 0

if __name__ == "__main__":
    sys.exit(main())
