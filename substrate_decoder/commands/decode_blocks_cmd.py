from typing import Dict

from substrate_decoder import SubstrateDecoderClient, io
from substrate_decoder.commands.common_options import BLOCK_OPTION, CONNECTION_OPTIONS
from substrate_decoder.decorators import guarded_command

NAME: str = "decode-blocks"
HELP: str = (
    "Fetch a block and print every extrinsic in it: "
    "its Pallet.call name followed by the decoded call data as JSON."
)
OPTIONS = [
    BLOCK_OPTION,
    [
        ("--print-bytes",),
        dict(action="store_true", help="Print the hex encoded extrinsic bytes too."),
    ],
] + CONNECTION_OPTIONS


@guarded_command
def method(substrate_decoder_client: SubstrateDecoderClient, args: Dict):
    block = substrate_decoder_client.get_block(args.get("block"))
    io.print_block(block, print_bytes=args.get("print_bytes", False))
