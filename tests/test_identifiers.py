import re

import pytest
from bindata.errors import InvalidPathError
from bindata.identifiers import is_valid_identifier, sanitize

VALID_NAME = re.compile(r"^[a-z_][a-z0-9_]*$")


def test_sanitize_replaces_separators_and_extension():
	assert sanitize("images/logo.png") == "images_logo_png"


def test_sanitize_leading_digit_gets_underscore():
	assert sanitize("3d/model.obj") == "_3d_model_obj"


def test_sanitize_lowercases():
	assert sanitize("Fonts/OpenSans-Bold.TTF") == "fonts_opensans_bold_ttf"


def test_sanitize_spaces_and_hyphens():
	assert sanitize("my docs/read-me now.txt") == "my_docs_read_me_now_txt"


def test_sanitize_leaves_other_characters_alone():
	assert sanitize("a+b.txt") == "a+b_txt"
	assert sanitize("café.txt") == "café_txt"


def test_sanitize_empty_path_is_rejected():
	with pytest.raises(InvalidPathError):
		sanitize("")


def test_invalid_path_error_is_a_value_error():
	with pytest.raises(ValueError):
		sanitize("")


@pytest.mark.parametrize(
	"path",
	[
		"a",
		"0",
		"9lives.txt",
		"dir/sub dir/file-name.tar.gz",
		".hidden",
		"-/-/-",
		"UPPER/Case.Mixed",
		"x_y/z_1.bin",
		"2024/01/02.log",
	],
)
def test_sanitized_names_are_valid(path: str):
	name = sanitize(path)
	assert VALID_NAME.match(name), name
	assert not name[0].isdigit()


def test_sanitize_is_deterministic():
	assert sanitize("static/app.js") == sanitize("static/app.js")


def test_known_collision_is_possible():
	# Distinct paths can sanitize identically; the generator rejects these
	assert sanitize("a-b.txt") == sanitize("a.b.txt")


def test_is_valid_identifier():
	assert is_valid_identifier("images_logo_png")
	assert is_valid_identifier("_3d_model_obj")
	assert not is_valid_identifier("a+b_txt")
	assert not is_valid_identifier("class")
	assert not is_valid_identifier("")
