"""
Shared utilities for the point converter.

Modules
-------
timestamps
    Conversions between wire timestamps and datetimes, RFC 3339 rendering
serialization
    Canonical indented JSON rendering used for structural comparisons
"""

__all__ = []
