"""Optional gzip compression of asset payloads."""

from __future__ import annotations

import gzip

# Highest ratio; generation is a build step, decompression cost is the same.
COMPRESS_LEVEL = 9


def compress(data: bytes, enabled: bool) -> tuple[bytes, bool]:
	"""Compress `data` when `enabled`.

	Returns the payload to embed together with the flag the generated
	accessor uses to decide whether to decompress. The flag only ever comes
	from here, so a payload can't be compressed without being marked as such
	(or the reverse).

	The gzip header timestamp is pinned to 0 so identical input always
	produces identical output. Small or already-compressed inputs may grow.
	"""
	if not enabled:
		return data, False
	return gzip.compress(data, compresslevel=COMPRESS_LEVEL, mtime=0), True


def decompress(data: bytes) -> bytes:
	"""Inverse of `compress` for flagged payloads.

	Truncated or corrupted input raises (`gzip.BadGzipFile`, `EOFError` or
	`zlib.error`) instead of returning partial data.
	"""
	return gzip.decompress(data)
