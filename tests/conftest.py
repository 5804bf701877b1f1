import importlib
import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from types import ModuleType

import pytest


@pytest.fixture
def import_package(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[Path], ModuleType]]:
	"""Import a generated package from its output directory.

	Generated packages share names across tests, so they are evicted from
	sys.modules afterwards.
	"""
	loaded: list[str] = []

	def _import(output_dir: Path) -> ModuleType:
		monkeypatch.syspath_prepend(str(output_dir.parent))
		importlib.invalidate_caches()
		loaded.append(output_dir.name)
		return importlib.import_module(output_dir.name)

	yield _import

	for name in loaded:
		for key in list(sys.modules):
			if key == name or key.startswith(name + "."):
				del sys.modules[key]


def make_tree(root: Path, files: dict[str, bytes]) -> Path:
	"""Create `files` (relative path -> content) under `root`."""
	for rel, content in files.items():
		path = root / rel
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_bytes(content)
	return root
