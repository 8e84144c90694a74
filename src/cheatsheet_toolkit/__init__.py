"""Top-level package for the Cheat Sheet Toolkit.

Provides subpackages:
- cheatsheet_toolkit.layout – content sizing, box packing and pagination
- cheatsheet_toolkit.core – box model, schema validation, serialization
- cheatsheet_toolkit.workspace – immutable canvas state and chat box commands
- cheatsheet_toolkit.output – PDF export and page previews
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import version as pkg_version, PackageNotFoundError

    try:
        return pkg_version("cheatsheet-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
