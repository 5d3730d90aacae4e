import json


def jsonify(o, indent="\t") -> str:
    """
    Convert decoded chain data to JSON. Values the json module does not know
    (bytes, scale objects) are written with their string form.
    """
    return json.dumps(o, indent=indent, default=_fallback)


def humanize(o) -> str:
    """
    Human readable single line form of a decoded value: strings and numbers
    as they are, containers as compact JSON.
    """
    if isinstance(o, str):
        return o
    if isinstance(o, (bool, int, float)) or o is None:
        return str(o)
    return json.dumps(o, default=_fallback)


def _fallback(o):
    if isinstance(o, (bytes, bytearray)):
        return "0x" + bytes(o).hex()
    return str(o)
