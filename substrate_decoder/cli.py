"""
Command line interface for SubstrateDecoderClient.
"""

import argparse
import logging
import re
import sys
from pathlib import PurePath
from typing import List, Optional, Sequence, Tuple

from substrate_decoder import consts
from substrate_decoder.config import ConnectionConfig
from substrate_decoder.errors import UsageError
from substrate_decoder.io import read_version
from substrate_decoder.substrate_decoder_client import SubstrateDecoderClient
from substrate_decoder.commands import (
    decode_blocks_cmd,
    decode_storage_items_cmd,
    fetch_metadata_cmd,
    find_spec_changes_cmd,
)

COMMANDS = {
    module.NAME: module
    for module in (
        decode_blocks_cmd,
        decode_storage_items_cmd,
        fetch_metadata_cmd,
        find_spec_changes_cmd,
    )
}

RUNTIME_NAME = re.compile(r"^(node|python(\d+(\.\d+)*)?)(\.exe)?$")
SCRIPT_NAMES = ("index.js", "__main__.py", "cli.py", consts.PROG)
FLAG_MARKER = "-"


def _is_runtime(token: str) -> bool:
    return bool(RUNTIME_NAME.match(PurePath(token).name))


def _is_script(token: str) -> bool:
    return PurePath(token).name in SCRIPT_NAMES


def split_command(argv: Sequence[str]) -> Tuple[Optional[str], List[str]]:
    """
    Split the process arguments into the command and the arguments that follow it.

    Leading interpreter and script tokens (e.g. `python cli.py`) are dropped first.
    If the first remaining token is a flag there is no command and every token is returned.
    """
    arguments = [str(a) for a in argv]
    if arguments and _is_runtime(arguments[0]):
        arguments = arguments[1:]
    if arguments and _is_script(arguments[0]):
        arguments = arguments[1:]

    if not arguments or arguments[0].startswith(FLAG_MARKER):
        return None, arguments
    return arguments[0], arguments[1:]


class CommandArgumentParser(argparse.ArgumentParser):
    """ Reports bad flags as UsageError instead of exiting with argparse's code 2. """

    def error(self, message):
        raise UsageError(f"{self.format_usage()}{self.prog}: error: {message}")


def _command_parser(command) -> CommandArgumentParser:
    parser = CommandArgumentParser(
        prog=f"{consts.PROG} {command.NAME}", description=command.HELP
    )
    parser.add_argument("--version", action="version", version=read_version())
    for (args, options) in command.OPTIONS:
        parser.add_argument(*args, **options)
    return parser


def _usage() -> str:
    return f"usage: {consts.PROG} {{{','.join(COMMANDS)}}} [options]"


def run_command(command, arguments: List[str]) -> int:
    """
    Parse the flags of a command, connect to the node and run the command.
    Flag errors are reported before any connection is made.
    """
    try:
        args = vars(_command_parser(command).parse_args(arguments))
    except UsageError as e:
        print(str(e), file=sys.stderr)
        return 1

    if args.get("verbose"):
        logging.getLogger().setLevel(logging.INFO)

    with SubstrateDecoderClient(ConnectionConfig.from_args(args)) as client:
        return command.method(client, args)


def cli(*arguments) -> int:
    """
    Parse list of command line arguments and call appropriate command.
    """
    command_name, remaining = split_command(arguments)

    if command_name is None:
        print(
            "You must provide a command. --help for documentation of commands.",
            file=sys.stderr,
        )
        print(_usage(), file=sys.stderr)
        return 1

    command = COMMANDS.get(command_name)
    if command is None:
        print(
            f"Unknown command '{command_name}'. Valid commands are: {', '.join(COMMANDS)}",
            file=sys.stderr,
        )
        print(_usage(), file=sys.stderr)
        return 1

    return run_command(command, remaining)


def main():
    logging.basicConfig(level=logging.WARNING, format=consts.LOG_FORMAT)
    return cli(*sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
