import logging
from typing import Dict

from substrate_decoder import SubstrateDecoderClient, io
from substrate_decoder.commands.common_options import (
    BLOCK_OPTION,
    CONNECTION_OPTIONS,
    ENTRY_OPTION,
)
from substrate_decoder.decorators import guarded_command
from substrate_decoder.storage_entry import MapStorageEntry, PlainStorageEntry

NAME: str = "decode-storage-items"
HELP: str = (
    "Print the value of a storage item at a block. "
    "For maps every key is printed followed by its value."
)
OPTIONS = [BLOCK_OPTION, ENTRY_OPTION] + CONNECTION_OPTIONS


@guarded_command
def method(substrate_decoder_client: SubstrateDecoderClient, args: Dict):
    block_number = args.get("block")
    resolved = args.get("entry")
    logging.info(f"fetching storage entry {resolved} at block {block_number}")

    block_hash = substrate_decoder_client.block_hash(block_number)
    entry = substrate_decoder_client.storage_entry(resolved, block_hash)

    if isinstance(entry, MapStorageEntry):
        pairs = substrate_decoder_client.query_map(entry, block_hash)
        count = io.print_storage_map(pairs)
        logging.info(f"{count} entries in {resolved}")
    elif isinstance(entry, PlainStorageEntry):
        io.print_storage_value(substrate_decoder_client.query_value(entry, block_hash))
