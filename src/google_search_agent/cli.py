import argparse
from typing import List, Optional

import uvicorn

from .config import APP_NAME, APP_VERSION, get_settings
from .logger import LOGGING_CONFIG

ENV_HELP = """\
Environment Variables:
  GOOGLE_API_KEY: Your Google API key for Custom Search API
  GOOGLE_CSE_ID:  Your Custom Search Engine ID (the 'cx' value)
"""


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} {APP_VERSION} - Google Search MCP Agent",
        epilog=ENV_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-listen", "--listen", default=settings.LISTEN_HOST, metavar="HOST",
                        help="Listen interface for the HTTP server (default: %(default)s)")
    parser.add_argument("-port", "--port", type=int, default=settings.PORT,
                        help="TCP port for the HTTP server (default: %(default)s)")
    parser.add_argument("-help", "--help", "-h", action="help",
                        help="Show help message")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    uvicorn.run(
        "google_search_agent.main:app",
        host=args.listen,
        port=args.port,
        log_config=LOGGING_CONFIG,
        log_level=get_settings().LOG_LEVEL.lower(),
    )
