#!/usr/bin/env python3
"""
CLI for the claim tracker.

Usage:
    python -m src.claims.cli console
    python -m src.claims.cli console --lecturer "Dr. Smith" --no-sample-data
    python -m src.claims.cli serve --port 8000
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from ..utils.config import get_settings


def setup_logging(verbose: bool = False, default_level: int = logging.INFO):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else default_level
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Submit, track and review lecturer claims',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive console with sample claims
  python -m src.claims.cli console

  # Submit as a specific lecturer against an empty store
  python -m src.claims.cli console --lecturer "Dr. Smith" --no-sample-data

  # Run the HTTP API
  python -m src.claims.cli serve --host 127.0.0.1 --port 8080
        """
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        '--verbose',
        '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    console_parser = subparsers.add_parser('console', parents=[common], help='Interactive claim console')
    console_parser.add_argument(
        '--lecturer',
        type=str,
        help='Lecturer name for submitted claims (default: CURRENT_LECTURER setting)'
    )
    console_parser.add_argument(
        '--no-sample-data',
        action='store_true',
        help='Start with an empty store'
    )

    serve_parser = subparsers.add_parser('serve', parents=[common], help='Run the HTTP API')
    serve_parser.add_argument('--host', type=str, help='Server host (default: HOST setting)')
    serve_parser.add_argument('--port', type=int, help='Server port (default: PORT setting)')
    serve_parser.add_argument('--reload', action='store_true', help='Reload on code changes')

    return parser.parse_args(argv)


def run_console(args: argparse.Namespace) -> None:
    """Start the interactive console."""
    from ..storage import ClaimStore, seed_sample_claims
    from ..views.console import ClaimConsole

    updates = {}
    if args.lecturer:
        updates['current_lecturer'] = args.lecturer
    if args.no_sample_data:
        updates['seed_sample_data'] = False
    settings = get_settings().model_copy(update=updates)

    store = ClaimStore()
    if settings.seed_sample_data:
        seed_sample_claims(store)

    ClaimConsole(store, settings).run()


def run_server(args: argparse.Namespace) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.api.app:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.debug,
        log_level="info",
    )


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    load_dotenv()
    args = parse_args(argv)

    # Keep store logs out of the interactive prompts unless asked for
    setup_logging(args.verbose, logging.WARNING if args.command == 'console' else logging.INFO)
    logger = logging.getLogger(__name__)

    try:
        if args.command == 'console':
            run_console(args)
        elif args.command == 'serve':
            run_server(args)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"Error running {args.command}: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
