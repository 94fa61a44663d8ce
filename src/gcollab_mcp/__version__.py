"""Version information for gcollab-mcp."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _get_version() -> str:
    """Get version from installed metadata, the VERSION file, or a fallback."""
    try:
        return version("gcollab-mcp")
    except PackageNotFoundError:
        pass

    # Source checkout without an install
    root_version = Path(__file__).parent.parent.parent / "VERSION"
    if root_version.exists():
        return root_version.read_text().strip()

    return "0.1.0"


__version__ = _get_version()
