from os.path import dirname, realpath
from pathlib import Path
from typing import Any, Iterable, Tuple, Union

from substrate_decoder.reformat import humanize, jsonify


def read_file(file_path: Union[Path, str]) -> str:
    with open(file_path, "r") as f:
        return f.read()


def read_version() -> str:
    version_path = Path(dirname(realpath(__file__))) / "VERSION"
    return read_file(version_path).strip()


def print_block(block, print_bytes: bool = False):
    """
    One qualified name line per extrinsic, each followed by its call data as JSON.
    With print_bytes the hex encoded extrinsics are listed first.
    """
    if print_bytes:
        print(f"Extrinsic Bytes: {jsonify([e.data for e in block.extrinsics])}")
    for extrinsic in block.extrinsics:
        print(extrinsic.qualified_name)
        print(jsonify(extrinsic.call_data))


def print_storage_value(value: Any):
    print(humanize(value))


def print_storage_map(pairs: Iterable[Tuple[Any, Any]]) -> int:
    count = 0
    for key, value in pairs:
        print(humanize(key))
        print(humanize(value))
        count += 1
    return count
