#!/usr/bin/env python3
"""Network configuration command line tool.

Usage:
    netconfig COMMAND [OPTION...]
    netconfig help [COMMAND]

Environment variables:
    NETCONFIG_CONFIG            Settings file (default: /etc/netconfig.yaml)
    NETCONFIG_DEFAULT_IFACE     Interface used when a command omits one
    NETCONFIG_LOG_LEVEL=DEBUG   Print diagnostics to stderr
"""
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .arguments import Arguments
from .commands import HELP_TOKENS, execute, print_help
from .config import load_settings
from .errors import NetconfigError
from .service import NetworkService
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def print_banner(app: str) -> None:
    print("OpenBMC network configuration.")
    print(f"Version {__version__}.")
    print(f"Usage: {app} COMMAND [OPTION...]")


def main(
    argv: Optional[Sequence[str]] = None,
    service: Optional[NetworkService] = None,
) -> int:
    """Main entry point, returns the process exit status."""
    if argv is None:
        argv = sys.argv
    app = Path(argv[0]).name if argv else "netconfig"
    args = Arguments(argv[1:])

    setup_logging()

    try:
        cmd = args.peek()
        if cmd is None or cmd in HELP_TOKENS:
            if cmd is not None:
                args.advance()
            if args.peek() is None:
                print_banner(app)
            print_help(args)
        else:
            settings = load_settings()
            asyncio.run(execute(args, settings, service))
    except NetconfigError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
