from pathlib import Path

import pytest
from bindata.codegen.registry import assemble_registry, check_entries, write_registry
from bindata.codegen.templates.unit import GENERATED_HEADER
from bindata.codegen.translate import RegistryEntry
from bindata.errors import DuplicateAssetError

ENTRIES = [
	RegistryEntry("images/logo.png", "images_logo_png"),
	RegistryEntry("3d/model.obj", "_3d_model_obj"),
]


def test_assemble_registry_defines_loader():
	source = assemble_registry(ENTRIES, package="assets")
	assert source.splitlines()[0] == GENERATED_HEADER
	assert "def load_assets() -> dict[str, Accessor]:" in source
	assert "def _readonly_view(data: bytes) -> memoryview:" in source
	assert "``assets``" in source
	compile(source, "__init__.py", "exec")


def test_assemble_registry_is_independent_of_entries():
	assert assemble_registry(ENTRIES, package="assets") == assemble_registry(
		[], package="assets"
	)


def test_duplicate_entries_are_rejected():
	with pytest.raises(DuplicateAssetError) as exc_info:
		assemble_registry([*ENTRIES, ENTRIES[0]], package="assets")
	assert exc_info.value.logical_path == "images/logo.png"


def test_check_entries_indexes_by_path():
	by_path = check_entries(ENTRIES)
	assert set(by_path) == {"images/logo.png", "3d/model.obj"}


def test_write_registry_creates_file(tmp_path: Path):
	out = tmp_path / "assets"
	assert write_registry(out, ENTRIES, package="assets") is True
	assert (out / "__init__.py").read_text() == assemble_registry(
		ENTRIES, package="assets"
	)


def test_write_registry_leaves_existing_file_untouched(tmp_path: Path):
	out = tmp_path / "assets"
	out.mkdir()
	init = out / "__init__.py"
	init.write_text("# hand-written\n")
	before = init.stat().st_mtime_ns

	assert write_registry(out, ENTRIES, package="assets") is False
	assert init.read_text() == "# hand-written\n"
	assert init.stat().st_mtime_ns == before


def test_write_registry_twice_writes_once(tmp_path: Path):
	out = tmp_path / "assets"
	assert write_registry(out, ENTRIES, package="assets") is True
	assert write_registry(out, ENTRIES, package="assets") is False
