"""
Console driver.

Runs a single server with the named modes module loaded and feeds it
protocol lines from stdin as one local user, printing the replies.

    python -m namedmodes --config namedmodes.yaml --nick alice --channel "#test"
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from namedmodes.channels import LocalUser
from namedmodes.config import load_config
from namedmodes.logging_config import setup_logging_from_config
from namedmodes.module import NamedModesModule
from namedmodes.server import Server


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="namedmodes")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--env-file", type=Path, default=Path(".env"))
    parser.add_argument("--nick", default="console")
    parser.add_argument(
        "--channel",
        action="append",
        default=[],
        help="Channel to create with the console user as operator (repeatable)",
    )
    parser.add_argument("--priv", action="append", default=[], help="Grant an operator privilege")
    return parser


def build_server(args: argparse.Namespace) -> Server:
    config = load_config(args.config, env_file=args.env_file)
    setup_logging_from_config(config.logging)
    server = Server(config)
    server.load_module(NamedModesModule(config.namedmodes))
    return server


def run(server: Server, user: LocalUser, stdin: TextIO, stdout: TextIO) -> int:
    """Process lines until EOF. Returns the number of lines dispatched."""
    handled = 0
    for line in stdin:
        if server.handle_line(user, line) is None:
            continue
        handled += 1
        for reply in server.render_replies(user):
            stdout.write(reply + "\n")
    return handled


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    server = build_server(args)

    user = LocalUser(args.nick, privileges=set(args.priv))
    for name in args.channel:
        server.channels.create(name).add_user(user, is_op=True)

    run(server, user, sys.stdin, sys.stdout)
