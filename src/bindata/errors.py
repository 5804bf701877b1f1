from __future__ import annotations

from pathlib import Path


class BindataError(Exception):
	"""Base class for every error raised by the generator."""


class ConfigError(BindataError):
	"""Invalid generator configuration."""


class InvalidPathError(BindataError, ValueError):
	"""A logical asset path that cannot be turned into an identifier."""


class InvalidIdentifierError(BindataError, ValueError):
	"""A sanitized path that is not usable as a Python name."""

	identifier: str
	logical_path: str

	def __init__(self, identifier: str, logical_path: str) -> None:
		self.identifier = identifier
		self.logical_path = logical_path
		super().__init__(
			f"Asset '{logical_path}' sanitizes to '{identifier}', which is not a valid Python identifier"
		)


class IdentifierCollisionError(BindataError):
	"""Two distinct logical paths sanitize to the same identifier."""

	identifier: str
	paths: tuple[str, str]

	def __init__(self, identifier: str, first: str, second: str) -> None:
		self.identifier = identifier
		self.paths = (first, second)
		super().__init__(
			f"Assets '{first}' and '{second}' both map to accessor '{identifier}'"
		)


class DuplicateAssetError(BindataError):
	"""The same logical path was registered twice."""

	logical_path: str

	def __init__(self, logical_path: str) -> None:
		self.logical_path = logical_path
		super().__init__(f"Asset '{logical_path}' is registered more than once")


class TranslationIOError(BindataError):
	"""Reading an asset or writing its generated unit failed."""

	path: Path

	def __init__(self, path: Path, cause: OSError) -> None:
		self.path = path
		reason = cause.strerror or str(cause)
		super().__init__(f"{path}: {reason}")
