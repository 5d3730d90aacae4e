from typing import Dict

from substrate_decoder import SubstrateDecoderClient, reformat
from substrate_decoder.commands.common_options import BLOCK_OPTION, CONNECTION_OPTIONS
from substrate_decoder.decorators import guarded_command

NAME: str = "fetch-metadata"
HELP: str = "Fetch the runtime metadata at a given block as JSON."
OPTIONS = [BLOCK_OPTION] + CONNECTION_OPTIONS


@guarded_command
def method(substrate_decoder_client: SubstrateDecoderClient, args: Dict):
    metadata = substrate_decoder_client.metadata(args.get("block"))
    print(reformat.jsonify(metadata))
