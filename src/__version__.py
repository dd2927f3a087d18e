"""
Version information for the OpenCensus to Cloud Monitoring point converter.

The package version is read from pyproject.toml via importlib.metadata.
This ensures a single source of truth for version management.
"""

try:
    from importlib.metadata import version

    __version__ = version("oc-monitoring-points")
except Exception:
    # Fallback for development (package not installed)
    # Read directly from pyproject.toml
    import tomllib
    from pathlib import Path

    try:
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject = tomllib.load(f)
            __version__ = pyproject["project"]["version"]
    except Exception:
        # Last resort fallback
        __version__ = "0.0.0-dev"
