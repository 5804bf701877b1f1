"""The shared registry module of a generated package."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from bindata.codegen.templates.registry import REGISTRY_FILENAME, REGISTRY_TEMPLATE
from bindata.codegen.templates.unit import GENERATED_HEADER
from bindata.codegen.translate import RegistryEntry
from bindata.errors import DuplicateAssetError, TranslationIOError

logger = logging.getLogger(__name__)


def check_entries(entries: Iterable[RegistryEntry]) -> dict[str, RegistryEntry]:
	"""Index entries by logical path, rejecting duplicates."""
	by_path: dict[str, RegistryEntry] = {}
	for entry in entries:
		if entry.logical_path in by_path:
			raise DuplicateAssetError(entry.logical_path)
		by_path[entry.logical_path] = entry
	return by_path


def assemble_registry(entries: Iterable[RegistryEntry], *, package: str) -> str:
	"""Render the registry module for a package holding `entries`.

	Accessor modules register themselves when `load_assets()` runs, so the
	rendered source does not list them and is identical for any asset set.
	"""
	check_entries(entries)
	return str(
		REGISTRY_TEMPLATE.render_unicode(header=GENERATED_HEADER, package=package)
	)


def write_registry(
	output_dir: Path, entries: Iterable[RegistryEntry], *, package: str
) -> bool:
	"""Write the registry module unless one already exists.

	Returns True if the file was written.
	"""
	content = assemble_registry(entries, package=package)
	path = output_dir / REGISTRY_FILENAME
	if path.exists():
		logger.debug(f"Registry {path} already present, leaving it untouched")
		return False
	try:
		output_dir.mkdir(parents=True, exist_ok=True)
		path.write_text(content, encoding="utf-8")
	except OSError as exc:
		raise TranslationIOError(path, exc) from exc
	logger.info(f"Wrote registry {path}")
	return True
