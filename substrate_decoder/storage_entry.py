"""
Resolution of user supplied `Pallet.Entry` names onto the storage items
described by the runtime metadata.
"""
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Union

from substrate_decoder.consts import CAMEL_CASE_HINT
from substrate_decoder.errors import UnknownStorageEntry, UnparseableEntryName

SEPARATOR = "."


class ResolvedEntry(NamedTuple):
    pallet: str
    entry: str

    def __str__(self):
        return f"{self.pallet}{SEPARATOR}{self.entry}"


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def resolve_entry_name(raw: str) -> ResolvedEntry:
    """
    Split 'Pallet.Entry' on its dot and lower-case the first character
    of both halves, e.g. 'Babe.Authorities' -> ('babe', 'authorities').

    :raises UnparseableEntryName: unless there is exactly one dot between two non-empty names
    """
    pallet, separator, entry = raw.partition(SEPARATOR)
    if not separator or not pallet or not entry or SEPARATOR in entry:
        raise UnparseableEntryName(raw)
    return ResolvedEntry(lower_first(pallet), lower_first(entry))


@dataclass
class PlainStorageEntry:
    """ A storage item holding a single value. """

    pallet: str
    name: str
    value_type: str = None


@dataclass
class MapStorageEntry:
    """ A storage item keyed by one or more parameters; its entries can be enumerated. """

    pallet: str
    name: str
    key_types: List[str] = field(default_factory=list)
    value_type: str = None


StorageEntry = Union[PlainStorageEntry, MapStorageEntry]


def storage_entry_from_metadata(storage_function: Dict) -> StorageEntry:
    """ Tag a serialized storage function from the metadata with its capability. """
    pallet = storage_function["module_name"]
    name = storage_function["storage_name"]
    key_types = list(storage_function.get("type_keys") or [])
    value_type = storage_function.get("type_value")
    if key_types:
        return MapStorageEntry(pallet, name, key_types, value_type)
    return PlainStorageEntry(pallet, name, value_type)


class StorageNamespaces:
    """
    Storage items available in a runtime, indexed by camelCase pallet and entry names.
    """

    def __init__(self, storage_functions: List[Dict]):
        self.pallets: Dict[str, Dict[str, StorageEntry]] = {}
        for storage_function in storage_functions:
            entry = storage_entry_from_metadata(storage_function)
            pallet_entries = self.pallets.setdefault(lower_first(entry.pallet), {})
            pallet_entries[lower_first(entry.name)] = entry

    def lookup(self, resolved: ResolvedEntry) -> StorageEntry:
        """
        :raises UnknownStorageEntry: if the pallet or the entry does not exist in this runtime
        """
        entries = self.pallets.get(resolved.pallet)
        if entries is None:
            raise UnknownStorageEntry(
                f"Pallet '{resolved.pallet}' has no storage in this runtime",
                CAMEL_CASE_HINT,
            )
        entry = entries.get(resolved.entry)
        if entry is None:
            raise UnknownStorageEntry(
                f"Storage entry '{resolved.entry}' not found in pallet '{resolved.pallet}'",
                CAMEL_CASE_HINT,
            )
        return entry
