"""
Canonical text serialization for structural comparisons.

Models compare with ``==`` directly; this helper renders any model, list or
mapping of models as indented JSON so mismatches read well in test output.
"""

from typing import Any

from pydantic import ConfigDict, TypeAdapter

# Models carry their own config; this covers bare floats in lists and dicts
_ANY = TypeAdapter(Any, config=ConfigDict(ser_json_inf_nan="constants"))


def serialize_as_json(value: Any) -> str:
    """
    Serialize a value to deterministic, 2-space indented JSON text.

    Field order follows model declaration order and sequences keep their
    order, so equal values always produce identical text.

    Examples
    --------
    >>> from src.schemas.common import Timestamp
    >>> print(serialize_as_json(Timestamp(seconds=1, nanos=2)))
    {
      "seconds": 1,
      "nanos": 2
    }
    """
    return _ANY.dump_json(value, indent=2).decode("utf-8")
