"""
Exposes the version of geocodec

Installed copies report the distribution metadata. A source checkout reads
the VERSION file at the repository root, the same file setup.py reads.
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _read_version_file() -> str | None:
    try:
        return _VERSION_FILE.read_text(encoding='utf-8').strip()
    except FileNotFoundError:
        return None


try:
    __version__ = version('geocodec')
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
