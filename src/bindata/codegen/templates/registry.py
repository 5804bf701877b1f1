from mako.template import Template

from bindata.codegen.templates.unit import GENERATED_HEADER

REGISTRY_FILENAME = "__init__.py"

# Shared registry module, written once per output directory. Nothing in it
# depends on the asset set, so it stays valid as assets come and go.
REGISTRY_TEMPLATE = Template(
	'''${header}
"""Embedded assets for the ``${package}`` package.

Call `load_assets()` once at startup to build the mapping from logical asset
path to accessor function.
"""

from __future__ import annotations

import importlib
import pkgutil
from collections.abc import Callable
from typing import Any

Accessor = Callable[[], Any]


def _readonly_view(data: bytes) -> memoryview:
    """Alias `data` as a read-only buffer without copying.

    Zero-copy accessors get their return value from here and nowhere else.
    The view shares storage with the module constant it wraps, so every
    caller sees the same memory. Writes raise TypeError. Never work around
    that (e.g. through ctypes): doing so corrupts every later read of the
    asset, far away from the write.
    """
    view = memoryview(data)
    return view if view.readonly else view.toreadonly()


def load_assets() -> dict[str, Accessor]:
    """Import every accessor module and collect them by logical path."""
    registry: dict[str, Accessor] = {}
    for info in sorted(pkgutil.iter_modules(__path__), key=lambda m: m.name):
        if info.ispkg:
            continue
        module = importlib.import_module(f"{__name__}.{info.name}")
        register = getattr(module, "register", None)
        if register is None:
            continue
        found: dict[str, Accessor] = {}
        register(found)
        for path, accessor in found.items():
            if path in registry:
                raise RuntimeError(f"Asset {path!r} is registered more than once")
            registry[path] = accessor
    return registry
'''
)
