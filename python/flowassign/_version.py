"""Installed version of flowassign, falling back to the source tree's."""
from importlib import metadata

DISTRIBUTION = "flowassign"


def _installed_version(default: str) -> str:
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout.
        return default


__version__ = _installed_version("0.1.0")

__all__ = ["DISTRIBUTION", "__version__"]
