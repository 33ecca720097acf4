"""CLI for the oracle sync job.

Usage:
  oracle-sync run          # one invocation, JSON result on stdout
  oracle-sync serve        # HTTP trigger server (GET /api/run)
"""
import argparse
import asyncio
import json
import sys

from equity_oracle_sync.main import configure_logging, run
from equity_oracle_sync.services.sync_factory import run_once


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def cmd_run(_: argparse.Namespace) -> int:
    result = asyncio.run(run_once())
    print_json(result.to_json())
    return 0 if result.success else 1


def cmd_serve(_: argparse.Namespace) -> int:
    run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oracle-sync",
        description="Publish NGX equity prices and bands to the on-chain oracle",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("run", help="Run one sync invocation").set_defaults(func=cmd_run)
    sub.add_parser("serve", help="Start the HTTP trigger server").set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "run":
        configure_logging()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
