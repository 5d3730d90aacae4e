#!/usr/bin/env python3
import functools
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from substrateinterface import SubstrateInterface

from .config import ConnectionConfig
from .errors import InternalError, UsageError
from .storage_entry import (
    MapStorageEntry,
    PlainStorageEntry,
    ResolvedEntry,
    StorageEntry,
    StorageNamespaces,
)


def api(function):
    """
    Decorator of API functions that protects user code from
    unknown exceptions raised by the transport or the decoder.
    It will catch all exceptions and throw InternalError, except for
    usage errors which carry a message meant for the user.

    :param function: function to be decorated
    :return: decorated function
    """

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            return function(*args, **kwargs)
        except (SyntaxError, TypeError, InternalError, UsageError):
            raise
        except Exception as e:
            raise InternalError(type(e).__name__, str(e)) from e

    return wrapper


def api_stream(function):
    """
    Same as `api` for generator functions; errors raised while iterating are wrapped too.
    """

    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        try:
            yield from function(*args, **kwargs)
        except (SyntaxError, TypeError, InternalError, UsageError):
            raise
        except Exception as e:
            raise InternalError(type(e).__name__, str(e)) from e

    return wrapper


@dataclass
class Extrinsic:
    pallet: str
    call: str
    call_data: Dict = field(default_factory=dict)
    # Hex encoded SCALE bytes of the whole extrinsic.
    data: str = None

    @property
    def qualified_name(self) -> str:
        return f"{self.pallet}.{self.call}"

    @staticmethod
    def from_decoded(decoded: Dict, data: str = None) -> "Extrinsic":
        call_data = decoded["call"]
        return Extrinsic(
            call_data["call_module"], call_data["call_function"], call_data, data
        )


@dataclass
class Block:
    number: int
    hash: str
    extrinsics: List[Extrinsic] = field(default_factory=list)


class SubstrateDecoderClient:
    """
    Websocket RPC client of a Substrate node.

    One instance owns exactly one connection; use it as a context manager
    so the connection is closed when the command is done.
    """

    def __init__(self, config: ConnectionConfig = None):
        """
        Connects to the node straight away. Connection errors are not caught here.

        :param config:    Connection settings, defaults to the public Polkadot node
        """
        self.config = config or ConnectionConfig()
        self.url = self.config.url
        logging.info(f"connecting to url: {self.url}")
        self.substrate = SubstrateInterface(
            url=self.url, type_registry_preset=self.config.type_registry_preset
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self.substrate.close()

    @api
    def block_hash(self, block_number: int) -> str:
        """ Return hash of the block with the given number.

        :raises InternalError: if the node does not know the block
        """
        block_hash = self.substrate.get_block_hash(block_number)
        if block_hash is None:
            raise InternalError("block_hash", f"Couldn't find block {block_number}")
        return block_hash

    @api
    def get_block(self, block_number: int) -> Block:
        """
        Fetch a block and decode its extrinsics.

        :param block_number:  Number of the block to fetch
        :return:              Block with extrinsics in on-chain order
        """
        logging.info(f"fetching block: {block_number}")
        block_hash = self.block_hash(block_number)
        block = self.substrate.get_block(block_hash=block_hash)
        extrinsics = [
            Extrinsic.from_decoded(extrinsic.value, extrinsic.data.to_hex())
            for extrinsic in block["extrinsics"]
        ]
        return Block(block_number, block_hash, extrinsics)

    @api
    def storage_namespaces(self, block_hash: str) -> StorageNamespaces:
        """ Storage items available in the runtime at the given block. """
        return StorageNamespaces(
            self.substrate.get_metadata_storage_functions(block_hash=block_hash)
        )

    @api
    def storage_entry(self, resolved: ResolvedEntry, block_hash: str) -> StorageEntry:
        """
        Find the storage item matching camelCase names in the runtime at the given block.

        :raises UnknownStorageEntry: if either the pallet or the entry is not found
        """
        return self.storage_namespaces(block_hash).lookup(resolved)

    @api
    def query_value(self, entry: PlainStorageEntry, block_hash: str) -> Any:
        """ Decoded value of a single-value storage item. """
        result = self.substrate.query(
            module=entry.pallet, storage_function=entry.name, block_hash=block_hash
        )
        return result.value

    @api_stream
    def query_map(
        self, entry: MapStorageEntry, block_hash: str
    ) -> Iterator[Tuple[Any, Any]]:
        """
        Enumerate every (key, value) pair of a map storage item.

        No limit is applied; pages are fetched lazily until the map is exhausted.
        An entry that fails to decode raises instead of being yielded as None.
        """
        result = self.substrate.query_map(
            module=entry.pallet,
            storage_function=entry.name,
            block_hash=block_hash,
            max_results=None,
            ignore_decoding_errors=False,
        )
        for key, value in result:
            yield key.value, value.value

    @api
    def metadata(self, block_number: int) -> Dict:
        """ Decoded runtime metadata at the given block. """
        block_hash = self.block_hash(block_number)
        return self.substrate.get_block_metadata(block_hash=block_hash, decode=True).value

    @api
    def spec_version(self, block_number: int) -> int:
        """ Runtime spec version in force at the given block. """
        block_hash = self.block_hash(block_number)
        runtime_version = self.substrate.get_block_runtime_version(block_hash)
        return runtime_version["specVersion"]

    @api
    def latest_block_number(self) -> int:
        return self.substrate.get_block_number(self.substrate.get_chain_head())
