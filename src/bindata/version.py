"""bindata version, as recorded in the installed distribution metadata."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version

__all__ = ["__version__"]

try:
	__version__: str = _pkg_version("bindata")
except PackageNotFoundError:
	# Running from a source checkout that was never installed
	__version__ = "0.0.0"
