from .codegen import (
	Asset,
	Bindata,
	BindataConfig,
	GeneratedUnit,
	GenerationReport,
	RegistryEntry,
	assemble_registry,
	translate,
)
from .compression import compress, decompress
from .encoding import decode_literal, encode, encode_literal
from .errors import (
	BindataError,
	ConfigError,
	DuplicateAssetError,
	IdentifierCollisionError,
	InvalidIdentifierError,
	InvalidPathError,
	TranslationIOError,
)
from .identifiers import is_valid_identifier, sanitize
from .version import __version__

__all__ = [
	"Asset",
	"Bindata",
	"BindataConfig",
	"BindataError",
	"ConfigError",
	"DuplicateAssetError",
	"GeneratedUnit",
	"GenerationReport",
	"IdentifierCollisionError",
	"InvalidIdentifierError",
	"InvalidPathError",
	"RegistryEntry",
	"TranslationIOError",
	"__version__",
	"assemble_registry",
	"compress",
	"decode_literal",
	"decompress",
	"encode",
	"encode_literal",
	"is_valid_identifier",
	"sanitize",
	"translate",
]
