"""Device description records.

A device description is produced by a loader (YAML, SVD) and consumed by
the generator. It only carries what generation needs: the device name and
the ordered peripheral descriptors of each family.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from periphgen.core.exceptions import ConfigurationError


class PeripheralDescriptor(Protocol):
    """Anything that names one peripheral instance."""

    @property
    def identifier(self) -> str:
        """Identifier used to derive the submodule name."""
        ...


@dataclass(frozen=True)
class GpioPort:
    """One physical GPIO port."""

    name: str

    @property
    def identifier(self) -> str:
        return self.name


@dataclass(frozen=True)
class SpiInstance:
    """One physical SPI controller instance."""

    struct_name: str

    @property
    def identifier(self) -> str:
        return self.struct_name


@dataclass(frozen=True)
class DeviceDescription:
    """Peripherals of one device, in description order."""

    name: str
    gpio_ports: tuple[GpioPort, ...] = field(default_factory=tuple)
    spi_instances: tuple[SpiInstance, ...] = field(default_factory=tuple)
    load_errors: tuple[tuple[str, ConfigurationError], ...] = field(default_factory=tuple)
    """(family, error) pairs for descriptors the loader had to reject."""

    def load_error(self, family: str) -> Optional[ConfigurationError]:
        """Return the first loader error recorded against family, if any."""
        for name, error in self.load_errors:
            if name == family:
                return error
        return None
