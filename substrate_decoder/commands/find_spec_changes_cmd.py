import logging
from typing import Dict

from substrate_decoder import SubstrateDecoderClient, reformat
from substrate_decoder.binary_chopper import find_changes
from substrate_decoder.commands.common_options import CONNECTION_OPTIONS
from substrate_decoder.decorators import guarded_command

NAME: str = "find-spec-changes"
HELP: str = (
    "Find the block numbers where the runtime spec version changes. "
    "This is where the metadata and node API may have changed."
)
OPTIONS = CONNECTION_OPTIONS


@guarded_command
def method(substrate_decoder_client: SubstrateDecoderClient, args: Dict):
    latest = substrate_decoder_client.latest_block_number()
    changes = []
    for block_number, spec_version in find_changes(
        substrate_decoder_client.spec_version, 0, latest
    ):
        logging.info(
            f"Found spec version change at block {block_number} (to spec version {spec_version})"
        )
        changes.append([block_number, spec_version])
    print(reformat.jsonify(changes, indent=None))
