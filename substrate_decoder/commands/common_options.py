from substrate_decoder import consts
from substrate_decoder.arg_types import block_number, storage_entry

URL_OPTION = [
    ("-u", "--url"),
    dict(
        required=False,
        type=str,
        default=consts.DEFAULT_URL,
        help=f"URL of the node to connect to. Default is {consts.DEFAULT_URL}",
    ),
]

BLOCK_OPTION = [
    ("-b", "--block"),
    dict(required=True, type=block_number, help="Block number to obtain"),
]

ENTRY_OPTION = [
    ("-e", "--entry"),
    dict(
        required=True,
        type=storage_entry,
        help="Storage entry to decode, in the form Pallet.Entry (e.g. System.Account)",
    ),
]

TYPE_REGISTRY_PRESET_OPTION = [
    ("--type-registry-preset",),
    dict(
        required=False,
        type=str,
        default=None,
        help=(
            "Name of the substrate-interface type registry preset (e.g. polkadot, kusama) "
            "used to decode blocks older than metadata V14."
        ),
    ),
]

VERBOSE_OPTION = [
    ("-v", "--verbose"),
    dict(action="store_true", help="Log connection and progress information to stderr"),
]

CONNECTION_OPTIONS = [URL_OPTION, TYPE_REGISTRY_PRESET_OPTION, VERBOSE_OPTION]
