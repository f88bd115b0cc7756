"""Core modules for the generator.

Family-agnostic generation logic:
- naming: identifier sanitizing
- submodules: per-instance submodule list building with collision checks
- encoding: register encoding tables and their validation
- gpio_enums / spi_enums: the hardware enumerations (source of truth)
- emitter: source rendering
- generator: per-family and per-device generation
- registry: peripheral family registry
"""

from periphgen.core.encoding import (
    HardwareEnumeration,
    RegisterEnum,
    Variant,
    validate_catalog,
)
from periphgen.core.generator import (
    FamilyOutput,
    GenerationResult,
    generate_device,
    generate_family,
)
from periphgen.core.naming import sanitize_name
from periphgen.core.registry import FamilyRegistry, get_family, list_available_families
from periphgen.core.submodules import SubmoduleDeclaration, build_submodules

__all__ = [
    # Encoding tables
    "HardwareEnumeration",
    "RegisterEnum",
    "Variant",
    "validate_catalog",
    # Naming / submodules
    "sanitize_name",
    "SubmoduleDeclaration",
    "build_submodules",
    # Generation
    "FamilyOutput",
    "GenerationResult",
    "generate_device",
    "generate_family",
    # Family registry
    "FamilyRegistry",
    "get_family",
    "list_available_families",
]
