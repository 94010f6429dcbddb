from __future__ import annotations

import argparse
import logging
from typing import Sequence

import uvicorn

from draftmcp.internal_core.config import ServiceConfig, load_config

APP_TARGETS = {
    "generator": "draftmcp.api.generator:app",
    "writer": "draftmcp.api.writer:app",
}


def build_parser(config: ServiceConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="draftmcp-serve",
        description="Run the draft generator or draft writer JSON-RPC service.",
    )
    parser.add_argument("service", choices=sorted(APP_TARGETS))
    parser.add_argument("--host", default=config.DRAFTMCP_HOST)
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Listen port (default: 8080 for generator, 8081 for writer).",
    )
    parser.add_argument("--log-level", default=config.DRAFTMCP_LOG_LEVEL)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    config = load_config()
    args = build_parser(config).parse_args(argv)
    port = args.port if args.port is not None else config.port_for(args.service)
    log_level = str(args.log_level).upper()

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(
        "%s service listening on %s:%s", args.service, args.host, port
    )
    uvicorn.run(APP_TARGETS[args.service], host=args.host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    main()
