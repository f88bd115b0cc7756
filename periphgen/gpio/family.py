"""GPIO peripheral family."""

from __future__ import annotations

from typing import Sequence

from periphgen.core.encoding import HardwareEnumeration
from periphgen.core.gpio_enums import gpio_catalog
from periphgen.interfaces.description import DeviceDescription, GpioPort
from periphgen.interfaces.family import PeripheralFamily


class GpioFamily(PeripheralFamily):
    """GPIO ports: one submodule per port plus the pin configuration enums."""

    name = "gpio"
    module_doc = "GPIO ports and pin configuration encodings."

    def catalog(self) -> tuple[HardwareEnumeration, ...]:
        return gpio_catalog()

    def descriptors(self, description: DeviceDescription) -> Sequence[GpioPort]:
        return description.gpio_ports

    def instance_doc(self, identifier: str) -> str:
        return f"GPIO port {identifier}."
