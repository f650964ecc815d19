from __future__ import annotations

from importlib import metadata


def tool_version() -> str:
    """Installed twmerge version; "0.0.0" when running from a source checkout."""
    try:
        return metadata.version("twmerge")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["tool_version"]
