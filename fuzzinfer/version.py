"""
Version management for fuzzinfer.

The version is read from pyproject.toml, which serves as the single source
of truth, with a constant fallback for installs that do not ship the file.
"""

from pathlib import Path

import tomli

_FALLBACK_VERSION = "0.1.0"


def _find_project_root() -> Path:
    """
    Find the project root directory containing pyproject.toml.

    Returns:
        Path: Path to the project root directory (or the best guess)
    """
    file_path = Path(__file__).resolve()

    # Package directory sits directly under the project root
    project_root = file_path.parent.parent
    if (project_root / "pyproject.toml").exists():
        return project_root

    cwd = Path.cwd()
    if (cwd / "pyproject.toml").exists():
        return cwd

    return project_root


PROJECT_ROOT = _find_project_root()
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def get_version_from_pyproject() -> str:
    """
    Read the version string from pyproject.toml.

    Returns:
        str: Version string, or the fallback version when the file is
        missing, invalid or belongs to another project
    """
    try:
        with open(PYPROJECT_PATH, "rb") as f:
            pyproject_data = tomli.load(f)

        project = pyproject_data["project"]
        if project.get("name") != "fuzzinfer":
            return _FALLBACK_VERSION
        return project["version"]
    except FileNotFoundError:
        return _FALLBACK_VERSION
    except (KeyError, tomli.TOMLDecodeError):
        return _FALLBACK_VERSION


# The package version, loaded from pyproject.toml
__version__ = get_version_from_pyproject()


def get_version() -> str:
    """
    Get the current version of the fuzzinfer package.

    Returns:
        str: Current version string
    """
    return __version__
