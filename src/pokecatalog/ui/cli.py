from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import uvicorn
from dotenv import load_dotenv

from pokecatalog.adapters.sqlalchemy.migrations import upgrade_head
from pokecatalog.adapters.web import create_app
from pokecatalog.app import build_application
from pokecatalog.config import ConfigurationError, configure_logging, get_server_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from pokecatalog.config import ServerConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run and manage the Pokémon catalog")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Serve the REST and WebSocket API")
    serve.add_argument(
        "--host",
        type=str,
        help="Interface to bind (defaults to POKECATALOG_HOST)",
    )
    serve.add_argument(
        "--port",
        type=int,
        help="Port to bind (defaults to POKECATALOG_PORT)",
    )

    db = subparsers.add_parser("db", help="Database management commands")
    db_sub = db.add_subparsers(dest="db_command", required=True)
    db_upgrade = db_sub.add_parser("upgrade", help="Apply migrations up to head")
    db_upgrade.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy URL to migrate (defaults to DATABASE_URI)",
    )

    type_ = subparsers.add_parser("type", help="Type management commands")
    type_sub = type_.add_subparsers(dest="type_command", required=True)
    type_create = type_sub.add_parser("create", help="Create a type")
    type_create.add_argument("name", type=str, help="Type name (stored lower-cased)")
    type_sub.add_parser("list", help="List all types")

    return parser.parse_args(list(argv))


def _serve(args: argparse.Namespace, server: ServerConfig) -> None:
    host = args.host or server.host
    port = server.port if args.port is None else args.port
    application = build_application()
    app = create_app(application, cors_origins=server.cors_origins)
    log.info("Serving on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port, log_level=server.log_level.lower())


def _type_command(args: argparse.Namespace) -> None:
    service = build_application().type_service
    if args.type_command == "create":
        created = service.create(args.name)
        log.info("Created type %s (%s)", created.id, created.name)
        return
    for snapshot in service.find_all():
        sys.stdout.write(f"{snapshot.id}\t{snapshot.name}\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        server = get_server_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid configuration")
        sys.exit(2)
    configure_logging(level=server.log_level_number)
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "serve":
            _serve(parsed_args, server)
        elif parsed_args.command == "db" and parsed_args.db_command == "upgrade":
            upgrade_head(database_uri=parsed_args.database_uri)
        elif parsed_args.command == "type":
            _type_command(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error in %s command", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()
