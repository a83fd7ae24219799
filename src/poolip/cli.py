"""CLI entry point for poolip."""

import argparse
import logging
import sys
from typing import Callable, Dict, List

from dotenv import load_dotenv

from poolip import __version__
from poolip.config import Config
from poolip.ip import (
    IPError,
    IPVersion,
    contains_cidr,
    contains_ip,
    ips_diff_set,
    ips_intersection_set,
    ips_union_set,
    is_cidr_overlap,
    next_ip,
    parse_ip,
    prev_ip,
)

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list to parse (defaults to sys.argv[1:]).
    """
    parser = argparse.ArgumentParser(
        prog="poolip",
        description="Parse, compare and combine IPv4/IPv6 addresses and CIDR blocks",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--ip-version",
        type=int,
        choices=[4, 6],
        default=None,
        help="IP version of all arguments (default: POOLIP_IP_VERSION or 4)",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    for name, help_text in (
        ("parse", "Parse an address or CIDR block and print it"),
        ("check", "Validate an address or CIDR block"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        cmd.add_argument("text")
        cmd.add_argument("--cidr", action="store_true", help="Text is in CIDR notation")

    cmd = commands.add_parser("contains", help="Check whether OUTER contains INNER")
    cmd.add_argument("outer")
    cmd.add_argument("inner")

    cmd = commands.add_parser("contains-ip", help="Check whether SUBNET contains IP")
    cmd.add_argument("subnet")
    cmd.add_argument("ip")

    cmd = commands.add_parser("overlap", help="Check whether two CIDR blocks overlap")
    cmd.add_argument("cidr1")
    cmd.add_argument("cidr2")

    for name, help_text in (
        ("next", "Print the address following IP"),
        ("prev", "Print the address preceding IP"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        cmd.add_argument("ip")

    for name, help_text in (
        ("diff", "Print addresses of IPS1 not in IPS2"),
        ("union", "Print addresses of IPS1 or IPS2"),
        ("intersect", "Print addresses of both IPS1 and IPS2"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        cmd.add_argument("ips1", help="Comma-separated addresses")
        cmd.add_argument("ips2", help="Comma-separated addresses")

    commands.add_parser("config", help="Print the effective configuration")

    return parser.parse_args(argv)


def _bool(value: bool) -> List[str]:
    return ["true" if value else "false"]


def _parse_list(version: IPVersion, text: str) -> list:
    return [parse_ip(version, item.strip(), False).ip for item in text.split(",") if item.strip()]


def _cmd_parse(args, version, config) -> List[str]:
    return [str(parse_ip(version, args.text, args.cidr))]


def _cmd_check(args, version, config) -> List[str]:
    parse_ip(version, args.text, args.cidr)
    return ["ok"]


def _cmd_contains(args, version, config) -> List[str]:
    return _bool(contains_cidr(version, args.outer, args.inner))


def _cmd_contains_ip(args, version, config) -> List[str]:
    return _bool(contains_ip(version, args.subnet, args.ip))


def _cmd_overlap(args, version, config) -> List[str]:
    return _bool(is_cidr_overlap(version, args.cidr1, args.cidr2))


def _cmd_next(args, version, config) -> List[str]:
    return [str(next_ip(parse_ip(version, args.ip, False).ip))]


def _cmd_prev(args, version, config) -> List[str]:
    return [str(prev_ip(parse_ip(version, args.ip, False).ip))]


def _set_command(operation) -> Callable:
    def run(args, version, config) -> List[str]:
        ips = operation(_parse_list(version, args.ips1), _parse_list(version, args.ips2))
        return [str(ip) for ip in ips]
    return run


def _cmd_config(args, version, config) -> List[str]:
    return [
        f"ip_version={config.ip_version.value}",
        f"max_queue_size={config.limiter.max_queue_size}",
        f"max_wait_time={config.limiter.max_wait_time}",
    ]


COMMANDS: Dict[str, Callable] = {
    "parse": _cmd_parse,
    "check": _cmd_check,
    "contains": _cmd_contains,
    "contains-ip": _cmd_contains_ip,
    "overlap": _cmd_overlap,
    "next": _cmd_next,
    "prev": _cmd_prev,
    "diff": _set_command(ips_diff_set),
    "union": _set_command(ips_union_set),
    "intersect": _set_command(ips_intersection_set),
    "config": _cmd_config,
}


def main(argv: list[str] | None = None) -> None:
    """Main entry point for poolip CLI."""
    args = parse_args(argv)

    load_dotenv()

    try:
        config = Config.from_env()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    config.setup_logging()
    logger.debug("Config: %s", config)

    version = IPVersion(args.ip_version) if args.ip_version else config.ip_version

    try:
        lines = COMMANDS[args.command](args, version, config)
    except IPError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    for line in lines:
        print(line)
