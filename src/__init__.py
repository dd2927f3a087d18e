"""
OpenCensus to Cloud Monitoring point converter.

This package translates OpenCensus metrics/v1 points into Cloud Monitoring
monitoring/v3 points. See `src.domain.convert` for the entry points.
"""

from .__version__ import __version__

__all__ = ["__version__"]
