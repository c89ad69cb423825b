"""Logic for decoding the signature object attached to function-like rows."""

from docsearch.errors import MalformedRowError
from docsearch.models import Signature


def _type_name(value: object) -> str | None:
    """Accept either ``{"name": "string"}`` or a bare ``"string"``."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("name"), str):
        return value["name"]
    return None


def decode_signature(raw: object) -> Signature | None:
    """Decode a raw signature object, or return None when the row has none."""
    if raw is None:
        return None
    if not isinstance(raw, dict):
        msg = f"signature must be an object, got {type(raw).__name__}"
        raise MalformedRowError(msg)

    raw_inputs = raw.get("inputs", [])
    if raw_inputs is None:
        raw_inputs = []
    if not isinstance(raw_inputs, list):
        msg = "signature inputs must be a list"
        raise MalformedRowError(msg)

    inputs = []
    for i, entry in enumerate(raw_inputs):
        name = _type_name(entry)
        if name is None:
            msg = f"signature input {i} has no type name"
            raise MalformedRowError(msg)
        inputs.append(name)

    output = None
    raw_output = raw.get("output")
    if raw_output is not None:
        output = _type_name(raw_output)
        if output is None:
            msg = "signature output has no type name"
            raise MalformedRowError(msg)

    return Signature(inputs=tuple(inputs), output=output)
