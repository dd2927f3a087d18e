"""
Shared wire types used by both the metrics and monitoring schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class FrozenModel(BaseModel):
    """Immutable base model for wire types.

    Non-finite floats serialize as ``Infinity``, ``-Infinity`` and ``NaN`` so
    they stay distinguishable from unset (``null``) fields.
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")


class Timestamp(FrozenModel):
    """Instant with nanosecond precision, in the protobuf well-known layout.

    Attributes
    ----------
    seconds: int
        Seconds since the Unix epoch (UTC). May be negative.
    nanos: int
        Non-negative fraction of a second in nanoseconds (0-999999999).
    """

    seconds: int = 0
    nanos: int = Field(0, ge=0, le=999_999_999)
