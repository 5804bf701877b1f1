from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from bindata.codegen.registry import REGISTRY_FILENAME, write_registry
from bindata.codegen.templates.unit import GENERATED_HEADER
from bindata.codegen.translate import (
	GeneratedUnit,
	RegistryEntry,
	accessor_name,
	translate,
)
from bindata.errors import ConfigError, IdentifierCollisionError, TranslationIOError

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


@dataclass
class BindataConfig:
	"""
	Configuration for asset generation.

	Attributes:
	    input_dir (Path): Directory whose files are embedded, recursively.
	    output_dir (Path): Package directory receiving the generated modules.
	    package (str): Name of the generated package.
	    compress (bool): Gzip payloads before embedding.
	    zero_copy (bool): Return read-only views instead of fresh copies.
	    jobs (int): Number of worker threads used for translation.
	    prune (bool): Remove generated modules whose asset disappeared.
	"""

	input_dir: Path | str
	"""Directory whose files are embedded, recursively."""

	output_dir: Path | str
	"""Package directory receiving the generated modules."""

	package: str | None = None
	"""Name of the generated package. Defaults to the output directory name."""

	compress: bool = True
	"""Gzip payloads before embedding; accessors decompress on first use."""

	zero_copy: bool = False
	"""Accessors return read-only views of the embedded constant instead of copies."""

	jobs: int = 1
	"""Number of worker threads used for translation."""

	prune: bool = True
	"""Remove generated modules whose asset no longer exists."""

	@property
	def input_root(self) -> Path:
		return Path(self.input_dir)

	@property
	def output_root(self) -> Path:
		return Path(self.output_dir)

	@property
	def package_name(self) -> str:
		return self.package or self.output_root.resolve().name

	def validate(self) -> None:
		if not self.input_root.is_dir():
			raise ConfigError(f"Input directory not found: {self.input_root}")
		if not self.package_name.isidentifier():
			raise ConfigError(
				f"Package name '{self.package_name}' is not a valid Python identifier"
			)
		if self.jobs < 1:
			raise ConfigError(f"jobs must be at least 1, got {self.jobs}")


@dataclass(frozen=True)
class Asset:
	source: Path
	logical_path: str
	identifier: str
	mtime: float


@dataclass
class GenerationReport:
	translated: list[str] = field(default_factory=list)
	skipped: list[str] = field(default_factory=list)
	pruned: list[str] = field(default_factory=list)
	registry_written: bool = False

	@property
	def total(self) -> int:
		return len(self.translated) + len(self.skipped)


def is_generated_file(path: Path) -> bool:
	"""Whether `path` starts with the generated-code header."""
	try:
		with path.open(encoding="utf-8") as f:
			return f.readline().rstrip("\n") == GENERATED_HEADER
	except (OSError, UnicodeDecodeError):
		return False


def write_unit(path: Path, content: str) -> Path:
	"""Write a generated module, creating parent directories as needed.

	The content goes to a temporary file first and is moved into place, so a
	failed write never leaves a partial module that looks up to date.
	"""
	tmp: Path | None = None
	try:
		path.parent.mkdir(exist_ok=True, parents=True)
		fd, name = tempfile.mkstemp(
			dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp"
		)
		tmp = Path(name)
		with os.fdopen(fd, "w", encoding="utf-8") as f:
			f.write(content)
		# mkstemp creates owner-only files
		os.chmod(tmp, 0o644)
		os.replace(tmp, path)
	except OSError as exc:
		if tmp is not None:
			tmp.unlink(missing_ok=True)
		raise TranslationIOError(path, exc) from exc
	return path


class Bindata:
	cfg: BindataConfig

	def __init__(self, config: BindataConfig) -> None:
		self.cfg = config

	@property
	def output_folder(self) -> Path:
		return self.cfg.output_root

	def output_path(self, asset: Asset) -> Path:
		return self.output_folder / f"{asset.identifier}.py"

	def _walk(self, root: Path) -> Iterator[Path]:
		try:
			entries = sorted(os.scandir(root), key=lambda e: e.name)
		except OSError as exc:
			raise TranslationIOError(root, exc) from exc
		for entry in entries:
			# Hidden files and whole hidden directories are skipped
			if entry.name.startswith(HIDDEN_PREFIX):
				continue
			# Directory symlinks are not descended into; file symlinks are read
			if entry.is_dir(follow_symlinks=False):
				yield from self._walk(Path(entry.path))
			elif entry.is_file():
				yield Path(entry.path)

	def discover(self) -> list[Asset]:
		"""List the assets under the input directory, sorted by logical path.

		Raises IdentifierCollisionError when two paths map to one accessor.
		"""
		root = self.cfg.input_root
		assets: list[Asset] = []
		owners: dict[str, str] = {}
		for path in self._walk(root):
			logical_path = path.relative_to(root).as_posix()
			identifier = accessor_name(logical_path)
			if identifier in owners:
				raise IdentifierCollisionError(
					identifier, owners[identifier], logical_path
				)
			owners[identifier] = logical_path
			try:
				mtime = path.stat().st_mtime
			except OSError as exc:
				raise TranslationIOError(path, exc) from exc
			assets.append(Asset(path, logical_path, identifier, mtime))
		assets.sort(key=lambda a: a.logical_path)
		return assets

	def is_stale(self, asset: Asset) -> bool:
		"""An output is stale when missing or older than its input."""
		try:
			out_mtime = self.output_path(asset).stat().st_mtime
		except FileNotFoundError:
			return True
		except OSError as exc:
			raise TranslationIOError(self.output_path(asset), exc) from exc
		return out_mtime < asset.mtime

	def translate_asset(self, asset: Asset) -> GeneratedUnit:
		"""Translate one asset and write its module."""
		logger.info(f"Translating file {asset.source}")
		try:
			data = asset.source.read_bytes()
		except OSError as exc:
			raise TranslationIOError(asset.source, exc) from exc
		unit = translate(
			data,
			asset.logical_path,
			compress=self.cfg.compress,
			zero_copy=self.cfg.zero_copy,
			package=self.cfg.package_name,
		)
		write_unit(self.output_folder / unit.filename, unit.source)
		return unit

	def generate_all(self) -> GenerationReport:
		"""Bring the output package up to date with the input directory.

		Every stale asset is retranslated; the first failure aborts the run
		before the registry is touched.
		"""
		self.cfg.validate()
		report = GenerationReport()
		assets = self.discover()
		stale: list[Asset] = []
		for asset in assets:
			if self.is_stale(asset):
				stale.append(asset)
			else:
				logger.debug(f"Up to date: {asset.logical_path}")
				report.skipped.append(asset.logical_path)

		if self.cfg.jobs > 1 and len(stale) > 1:
			# map() re-raises the first worker failure when results are consumed
			with ThreadPoolExecutor(max_workers=self.cfg.jobs) as pool:
				units = list(pool.map(self.translate_asset, stale))
		else:
			units = [self.translate_asset(asset) for asset in stale]
		report.translated.extend(unit.logical_path for unit in units)

		# Registry is assembled only after every worker has finished
		entries = [RegistryEntry(a.logical_path, a.identifier) for a in assets]
		report.registry_written = write_registry(
			self.output_folder, entries, package=self.cfg.package_name
		)

		if self.cfg.prune:
			report.pruned = self._prune({a.identifier for a in assets})
		return report

	def _prune(self, identifiers: set[str]) -> list[str]:
		"""Remove generated modules with no corresponding asset."""
		removed: list[str] = []
		if not self.output_folder.is_dir():
			return removed
		for path in sorted(self.output_folder.glob("*.py")):
			if path.name == REGISTRY_FILENAME or path.stem in identifiers:
				continue
			if not is_generated_file(path):
				continue
			try:
				path.unlink()
				logger.debug(f"Removed stale file: {path}")
				removed.append(path.name)
			except OSError as e:
				logger.warning(f"Could not remove stale file {path}: {e}")
		return removed
