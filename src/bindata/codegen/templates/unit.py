from mako.template import Template

GENERATED_HEADER = "# Code generated by bindata. DO NOT EDIT."

# Names a generated unit defines or calls. An accessor with one of these names
# would shadow them; `load_assets` would also be shadowed on the package.
RESERVED_NAMES = frozenset(
	{
		"annotations",
		"gzip",
		"threading",
		"register",
		"load_assets",
		"_payload",
		"_lock",
		"_cache",
		"_readonly_view",
		"bytearray",
		"memoryview",
	}
)

# One accessor module per asset
UNIT_TEMPLATE = Template(
	'''${header}
"""Embedded asset for the ``${package}`` package."""

from __future__ import annotations

% if compressed:
import gzip
import threading
% endif
from typing import TYPE_CHECKING

% if zero_copy:
from . import _readonly_view

% endif
if TYPE_CHECKING:
    from collections.abc import Callable, MutableMapping

LOGICAL_PATH = ${logical_path_repr}
COMPRESSED = ${compressed}
SIZE = ${size}

_DATA = ${literal}
% if compressed:

_lock = threading.Lock()
_cache: bytes | None = None


def _payload() -> bytes:
    global _cache
    if _cache is None:
        with _lock:
            if _cache is None:
                _cache = gzip.decompress(_DATA)
    return _cache
% else:


def _payload() -> bytes:
    return _DATA
% endif


def ${identifier}() -> ${return_type}:
% if zero_copy:
    """Return a read-only view of the asset bytes.

    The view aliases storage shared with every other call. It must never be
    written to: Python raises TypeError on writes, and bypassing that
    corrupts the asset for the rest of the process.
    """
% else:
    """Return a fresh, mutable copy of the asset bytes."""
% endif
    return ${return_expr}


def register(registry: MutableMapping[str, Callable[[], ${return_type}]]) -> None:
    registry[LOGICAL_PATH] = ${identifier}
'''
)
