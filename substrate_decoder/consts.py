PROG = "substrate-decoder"

DEFAULT_URL = "wss://polkadot-public-rpc.blockops.network/ws"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

CAMEL_CASE_HINT = "Pallet and entry names must be camelCase, e.g. 'system.account'."
