import argparse

from substrate_decoder.errors import UnparseableEntryName
from substrate_decoder.storage_entry import ResolvedEntry, resolve_entry_name


def block_number(number) -> int:
    """Check number is an integer greater than or equal to 0"""
    try:
        n = int(number, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{number} is not an integer block number")
    if n < 0:
        raise argparse.ArgumentTypeError(f"{number} is not a valid block number")
    return n


def storage_entry(raw: str) -> ResolvedEntry:
    """ Check the entry looks like Pallet.Entry and resolve it to camelCase names. """
    try:
        return resolve_entry_name(raw)
    except UnparseableEntryName as e:
        raise argparse.ArgumentTypeError(str(e))
