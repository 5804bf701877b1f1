"""Accessor names derived from logical asset paths."""

from __future__ import annotations

import keyword
import os

from bindata.errors import InvalidPathError

# Characters folded to "_". Everything else passes through untouched, so
# exotic paths can still produce names Python rejects; callers check with
# `is_valid_identifier`.
_REPLACED = frozenset({"/", os.sep, " ", ".", "-"})


def sanitize(relative_path: str) -> str:
	"""Turn a relative asset path into an accessor identifier.

	The path is lower-cased, path separators, spaces, periods and hyphens
	become underscores, and a leading digit gets an underscore prefix:

	    >>> sanitize("images/logo.png")
	    'images_logo_png'
	    >>> sanitize("3d/model.obj")
	    '_3d_model_obj'

	Distinct paths can collide (``a-b`` and ``a.b``); the generator
	detects this when it discovers assets.
	"""
	if not relative_path:
		raise InvalidPathError("Cannot derive an identifier from an empty path")

	name = "".join("_" if ch in _REPLACED else ch for ch in relative_path.lower())
	if name[0].isdecimal():
		# Identifiers can't start with a digit
		name = "_" + name
	return name


def is_valid_identifier(name: str) -> bool:
	"""Whether `name` can be used as both a module and a function name."""
	return name.isidentifier() and not keyword.iskeyword(name)
