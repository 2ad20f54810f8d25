"""CLI entry point for the CWA weather proxy."""

import argparse
import json
import logging

from pydantic import BaseModel

from cwaproxy.catalog.regions import DEFAULT_CATALOG
from cwaproxy.config.loader import (
    config_hash,
    configure_logging,
    get_config_value,
    load_config,
    masked_config,
    masked_dump,
)
from cwaproxy.ingest.cwa_client import CwaClient
from cwaproxy.service.envelope import classify_error, success_envelope
from cwaproxy.service.forecast_service import ForecastService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cwaproxy",
        description="Taiwan county weather forecast proxy for the CWA open-data API",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default=None, help="Bind address")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    # regions
    sub.add_parser("regions", help="List supported region keys")

    # fetch weather|weekly KEY
    fetch_p = sub.add_parser("fetch", help="Fetch one forecast and print JSON")
    fetch_p.add_argument("dataset", choices=["weather", "weekly"])
    fetch_p.add_argument("city", help="Region key, e.g. taipei")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Display one config value")
    get_p.add_argument("key", help="Dotted key, e.g. cwa.timeout")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)
    configure_logging(config.logging.level)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "regions":
        return _cmd_regions()
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from cwaproxy.api.app import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("Starting server on %s:%d (config %s)", host, port, config_hash(config))
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_regions() -> int:
    for key in DEFAULT_CATALOG:
        print(f"{key}\t{DEFAULT_CATALOG.resolve(key)}")
    return 0


def _cmd_fetch(config, args) -> int:
    service = ForecastService(DEFAULT_CATALOG, CwaClient.from_config(config.cwa))
    handler = service.short_range if args.dataset == "weather" else service.weekly
    try:
        body = success_envelope(handler(args.city))
        code = 0
    except Exception as e:
        body = classify_error(e).to_dict()
        code = 1
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return code


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(masked_dump(config))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(masked_config(config), args.key)
        except (KeyError, IndexError, ValueError):
            print(f"Error: unknown config key {args.key}")
            return 1
        if isinstance(value, BaseModel):
            print(value.model_dump_json(indent=2))
        else:
            print(value)
        return 0
    print("Use: config show | config get KEY")
    return 1
