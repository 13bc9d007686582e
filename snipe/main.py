"""Command line entry point: blocktime estimator for ethereum mainnet"""

from __future__ import annotations

import argparse
import sys
from enum import Enum

from snipe.config import SnipeConfig
from snipe.convert import block_to_time, list_timezones, time_to_block
from snipe.errors import SnipeError
from snipe.logger import set_log

log = set_log(__name__)


class RunCommand(Enum):
    """Enum for supported commands"""

    BLOCK_TO_TIME = "block-to-time"
    TIME_TO_BLOCK = "time-to-block"
    LIST_TIMEZONES = "list-timezones"


def build_parser() -> argparse.ArgumentParser:
    """Global flags plus one sub parser per RunCommand"""
    parser = argparse.ArgumentParser(
        prog="snipe",
        description="Convert blocknumber to approximate time, "
        "and time to approximate blocknumber",
    )
    parser.add_argument("-r", "--rpc-url", type=str, help="The rpc url to use")
    parser.add_argument("-t", "--timezone", type=str, help="The timezone to use")
    parser.add_argument(
        "-f",
        "--format",
        type=str,
        dest="date_format",
        help="strftime format of printed times (block-to-time only)",
    )
    commands = parser.add_subparsers(dest="command")

    block_to_time_parser = commands.add_parser(
        RunCommand.BLOCK_TO_TIME.value, aliases=["btt"], help="blocknumber to time"
    )
    block_to_time_parser.add_argument(
        "block_num", type=int, help="The blocknumber to convert"
    )
    block_to_time_parser.set_defaults(run=RunCommand.BLOCK_TO_TIME)

    time_to_block_parser = commands.add_parser(
        RunCommand.TIME_TO_BLOCK.value,
        aliases=["ttb"],
        help="time (YYYY[-MM[-DD[ hh[:mm[:ss]]]]]) to blocknumber",
    )
    time_to_block_parser.add_argument("time", type=str, help="The time to convert")
    time_to_block_parser.set_defaults(run=RunCommand.TIME_TO_BLOCK)

    list_parser = commands.add_parser(
        RunCommand.LIST_TIMEZONES.value,
        aliases=["tz"],
        help="get all available timezones",
    )
    list_parser.set_defaults(run=RunCommand.LIST_TIMEZONES)
    return parser


def run(args: argparse.Namespace) -> str:
    """Executes the parsed command, returning what should be printed"""
    config = SnipeConfig.from_env().with_overrides(
        rpc_url=args.rpc_url, time_zone=args.timezone, date_format=args.date_format
    )
    if args.run == RunCommand.BLOCK_TO_TIME:
        return block_to_time(config, args.block_num)
    if args.run == RunCommand.TIME_TO_BLOCK:
        return str(time_to_block(config, args.time))
    if args.run == RunCommand.LIST_TIMEZONES:
        return "\n".join(list_timezones())
    raise ValueError(f"Unknown Command {args.run}")


def main(argv: list[str] | None = None) -> None:
    """Parses `argv`, prints the result and exits non-zero on failure"""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "run", None) is None:
        parser.print_help()
        sys.exit(2)

    log.debug(f"Running snipe with arguments {args}")
    try:
        print(run(args))
    except SnipeError as err:
        log.error(err)
        sys.exit(1)


if __name__ == "__main__":
    main()
