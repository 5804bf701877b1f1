import gzip
import zlib

import pytest
from bindata.compression import compress, decompress


def test_disabled_returns_input_unchanged():
	data = b"\x00\x01hello"
	out, flag = compress(data, enabled=False)
	assert out is data
	assert flag is False


def test_enabled_gzips_and_flags():
	data = b"abc" * 100
	out, flag = compress(data, enabled=True)
	assert flag is True
	assert out[:2] == b"\x1f\x8b"
	assert len(out) < len(data)
	assert gzip.decompress(out) == data


@pytest.mark.parametrize(
	"data",
	[b"", b"\x00", bytes(range(256)), bytes(range(256)) * 40, b"plain text\n"],
)
def test_round_trip(data: bytes):
	out, flag = compress(data, enabled=True)
	assert flag
	assert decompress(out) == data


def test_output_is_deterministic():
	data = bytes(range(256)) * 3
	assert compress(data, True) == compress(data, True)


def test_tiny_input_may_grow():
	out, flag = compress(b"x", enabled=True)
	assert flag
	assert len(out) > 1


def test_corrupted_payload_raises():
	with pytest.raises(gzip.BadGzipFile):
		decompress(b"not gzip at all")


def test_truncated_payload_raises():
	out, _ = compress(b"some data " * 50, enabled=True)
	with pytest.raises((EOFError, zlib.error, gzip.BadGzipFile)):
		decompress(out[: len(out) // 2])
