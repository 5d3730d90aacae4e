from dataclasses import dataclass
from typing import Dict, Optional

from substrate_decoder import consts


@dataclass
class ConnectionConfig:
    url: str = consts.DEFAULT_URL
    # Type registry used by substrate-interface for blocks older than metadata V14.
    type_registry_preset: Optional[str] = None

    @staticmethod
    def from_args(args: Dict) -> "ConnectionConfig":
        """ Build the connection config from parsed command line flags, keeping defaults for absent ones. """
        return ConnectionConfig(
            url=args.get("url") or consts.DEFAULT_URL,
            type_registry_preset=args.get("type_registry_preset"),
        )
