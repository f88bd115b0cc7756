"""SPI peripheral family."""

from __future__ import annotations

from typing import Sequence

from periphgen.core.encoding import HardwareEnumeration
from periphgen.core.spi_enums import spi_catalog
from periphgen.interfaces.description import DeviceDescription, SpiInstance
from periphgen.interfaces.family import PeripheralFamily


class SpiFamily(PeripheralFamily):
    """SPI controllers: one submodule per instance plus the protocol enums."""

    name = "spi"
    module_doc = "SPI controllers and protocol configuration encodings."

    def catalog(self) -> tuple[HardwareEnumeration, ...]:
        return spi_catalog()

    def descriptors(self, description: DeviceDescription) -> Sequence[SpiInstance]:
        return description.spi_instances

    def instance_doc(self, identifier: str) -> str:
        return f"SPI controller {identifier}."
