from .codegen import Asset, Bindata, BindataConfig, GenerationReport
from .registry import assemble_registry, write_registry
from .translate import GeneratedUnit, RegistryEntry, accessor_name, translate
