"""Errors raised while translating metric points."""

from __future__ import annotations

from typing import Optional


class ConversionError(ValueError):
    """A source point cannot be expressed in monitoring form.

    Attributes
    ----------
    kind: Optional[str]
        Variant name of the offending value (e.g. "summary"), or None when the
        point carried no value at all.
    """

    def __init__(self, message: str, kind: Optional[str] = None) -> None:
        super().__init__(message)
        self.kind = kind
