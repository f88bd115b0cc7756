"""Peripheral register enumeration generator.

Generates, per peripheral family (GPIO, SPI), a Python package holding one
submodule per peripheral instance and the family's hardware enumerations
with their exact register bit-field encodings.

Getting started:
    from periphgen import DeviceDescription, GpioPort, generate_device

    result = generate_device(DeviceDescription("demo", gpio_ports=(GpioPort("PortA"),)))
    result.raise_for_errors()
    files = result.files()
"""

from periphgen.core.exceptions import (
    ConfigurationError,
    EmptyIdentifierError,
    EncodingIntegrityError,
    GenerationError,
    NameCollisionError,
)
from periphgen.core.generator import GenerationResult, generate_device, generate_family
from periphgen.core.naming import sanitize_name
from periphgen.core.registry import get_family, list_available_families
from periphgen.interfaces.description import DeviceDescription, GpioPort, SpiInstance

# Family implementations (auto-register when imported)
from periphgen.gpio import GpioFamily
from periphgen.spi import SpiFamily

__all__ = [
    # Errors
    "GenerationError",
    "ConfigurationError",
    "EmptyIdentifierError",
    "EncodingIntegrityError",
    "NameCollisionError",
    # Description
    "DeviceDescription",
    "GpioPort",
    "SpiInstance",
    # Generation
    "GenerationResult",
    "generate_device",
    "generate_family",
    "sanitize_name",
    # Families
    "get_family",
    "list_available_families",
    "GpioFamily",
    "SpiFamily",
]
