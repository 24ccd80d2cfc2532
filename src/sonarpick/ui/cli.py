from __future__ import annotations

import argparse
import locale
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from sonarpick import __version__
from sonarpick.adapters.sonarqube import SonarQubeAPIError
from sonarpick.app import configure_projects
from sonarpick.config import ConfigurationError, configure_logging
from sonarpick.domain.model import SortPolicy
from sonarpick.domain.ports import SelectionAborted

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sonarpick",
        description="Choose which SonarQube projects the quality dashboard monitors",
    )
    parser.add_argument(
        "--config",
        type=str,
        help='Path to the settings file (default: $SONARPICK_CONFIG or "./config.json")',
    )
    parser.add_argument(
        "--filter",
        dest="search",
        type=str,
        help="Only show projects whose key or name contains this text (case-insensitive)",
    )
    parser.add_argument(
        "--sort",
        type=SortPolicy,
        choices=list(SortPolicy),
        help='Ordering of the project list (defaults to "sortBy" in the settings file)',
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Log API calls and raw responses",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        configure_projects(
            config_path=parsed_args.config,
            search=parsed_args.search,
            sort_policy=parsed_args.sort,
            debug=parsed_args.debug,
        )
    except SelectionAborted:
        log.info("Selection cancelled; configuration left unchanged.")
        sys.exit(0)
    except SonarQubeAPIError as exc:
        log.error("Error fetching projects from SonarQube: %s", exc)  # noqa: TRY400
        if exc.hint:
            log.error(exc.hint)  # noqa: TRY400
        log.debug("Details: %s", exc.detail)
        sys.exit(1)
    except ConfigurationError as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error while configuring projects")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def use_system_collation() -> None:
    """Sort project names with the operator's locale rules instead of the C locale."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        log.warning("Could not apply the system collation locale: %s", exc)


def run() -> None:
    load_dotenv()
    use_system_collation()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
