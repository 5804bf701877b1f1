"""Translation of a single asset into its accessor module."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bindata.codegen.templates.unit import (
	GENERATED_HEADER,
	RESERVED_NAMES,
	UNIT_TEMPLATE,
)
from bindata.compression import compress as compress_payload
from bindata.encoding import encode
from bindata.errors import InvalidIdentifierError
from bindata.identifiers import is_valid_identifier, sanitize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
	logical_path: str
	identifier: str


@dataclass(frozen=True)
class GeneratedUnit:
	"""Output of `translate` for one asset."""

	identifier: str
	"""Accessor function name, also the module name."""

	logical_path: str
	"""Key under which the accessor is registered."""

	source: str
	"""Full Python source of the accessor module."""

	compressed: bool
	"""Whether the embedded payload is gzip-compressed."""

	size: int
	"""Length of the original asset in bytes."""

	@property
	def filename(self) -> str:
		return f"{self.identifier}.py"

	@property
	def entry(self) -> RegistryEntry:
		return RegistryEntry(self.logical_path, self.identifier)


def accessor_name(logical_path: str) -> str:
	"""Sanitize `logical_path` and check the result can name a module."""
	identifier = sanitize(logical_path)
	if (
		not is_valid_identifier(identifier)
		or identifier in RESERVED_NAMES
		# Dunder modules (__init__, __main__) belong to the package itself
		or (identifier.startswith("__") and identifier.endswith("__"))
	):
		raise InvalidIdentifierError(identifier, logical_path)
	return identifier


def translate(
	data: bytes,
	logical_path: str,
	*,
	compress: bool = True,
	zero_copy: bool = False,
	package: str = "assets",
) -> GeneratedUnit:
	"""Render the accessor module that reproduces `data` at runtime.

	The result only depends on the arguments, so translating the same asset
	twice yields byte-identical source.
	"""
	identifier = accessor_name(logical_path)
	payload, compressed = compress_payload(data, compress)
	encoded = encode(payload, zero_copy)

	source = str(
		UNIT_TEMPLATE.render_unicode(
			header=GENERATED_HEADER,
			package=package,
			logical_path_repr=repr(logical_path),
			identifier=identifier,
			compressed=compressed,
			zero_copy=encoded.zero_copy,
			size=len(data),
			literal=encoded.literal,
			return_type=encoded.return_type,
			return_expr=encoded.return_expr,
		)
	)
	if compressed:
		logger.debug(
			f"Compressed {logical_path}: {len(data)} -> {len(payload)} bytes"
		)
	return GeneratedUnit(
		identifier=identifier,
		logical_path=logical_path,
		source=source,
		compressed=compressed,
		size=len(data),
	)
