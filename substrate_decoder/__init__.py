from .errors import InternalError, UsageError
from .config import ConnectionConfig
from .substrate_decoder_client import SubstrateDecoderClient
