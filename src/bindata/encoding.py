"""Python source literals for embedded payloads.

A payload is always emitted as a `bytes` literal. The memory-layout mode only
changes what the accessor hands back to callers:

- safe-copy: a fresh `bytearray` per call, free to mutate.
- zero-copy: a read-only `memoryview` aliasing the module constant. No copy
  is made, and nothing may write through it. Python refuses writes to such a
  view, which is the whole point: the same storage backs every later call.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass

# Input bytes per source line; worst case is 4 characters per byte.
CHUNK_SIZE = 32

_INDENT = "    "


def _escape(data: bytes) -> str:
	out: list[str] = []
	for b in data:
		if 0x20 <= b < 0x7F and b not in (0x22, 0x5C):  # printable, not " or \
			out.append(chr(b))
		else:
			out.append(f"\\x{b:02x}")
	return "".join(out)


def encode_literal(data: bytes) -> str:
	"""Return a `bytes` literal expression that evaluates to `data`.

	Payloads longer than one chunk are wrapped in parentheses and split into
	implicitly concatenated lines.
	"""
	if len(data) <= CHUNK_SIZE:
		return f'b"{_escape(data)}"'

	lines = ["("]
	for start in range(0, len(data), CHUNK_SIZE):
		lines.append(f'{_INDENT}b"{_escape(data[start : start + CHUNK_SIZE])}"')
	lines.append(")")
	return "\n".join(lines)


def decode_literal(literal: str) -> bytes:
	"""Evaluate a literal produced by `encode_literal`."""
	value = ast.literal_eval(literal)
	if not isinstance(value, bytes):
		raise ValueError(f"Expected a bytes literal, got {type(value).__name__}")
	return value


@dataclass(frozen=True)
class EncodedPayload:
	literal: str
	"""Source of the `bytes` literal."""

	zero_copy: bool
	"""Whether the accessor aliases the literal instead of copying it."""

	@property
	def return_expr(self) -> str:
		"""Expression the accessor returns, given `_payload()` yields bytes."""
		if self.zero_copy:
			return "_readonly_view(_payload())"
		return "bytearray(_payload())"

	@property
	def return_type(self) -> str:
		return "memoryview" if self.zero_copy else "bytearray"


def encode(data: bytes, zero_copy: bool) -> EncodedPayload:
	"""Encode `data` for embedding in one of the two memory-layout modes."""
	return EncodedPayload(literal=encode_literal(data), zero_copy=zero_copy)
