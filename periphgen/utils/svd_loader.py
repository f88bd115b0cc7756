"""Device descriptions from CMSIS-SVD files.

Only peripheral names are read. Peripherals whose name starts with "GPIO"
become GPIO ports (GPIOA -> GPIO_A), those starting with "SPI" become SPI
instances under their own name, both in document order.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from periphgen.core.exceptions import ConfigurationError
from periphgen.interfaces.description import DeviceDescription, GpioPort, SpiInstance

GPIO_PREFIX = "gpio"
SPI_PREFIX = "spi"


def _text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    return child.text.strip()


def gpio_port_from_peripheral(name: str) -> GpioPort:
    """Map an SVD GPIO peripheral name to its port descriptor.

    Raises:
        ConfigurationError: If the name carries no port suffix (e.g. "GPIO").
    """
    suffix = name[len(GPIO_PREFIX):].strip("_")
    if not suffix:
        raise ConfigurationError(
            name,
            f"Peripheral '{name}' is not named as expected for a GPIO peripheral (i.e. 'GPIOA')",
        )
    return GpioPort(name=f"{name[:len(GPIO_PREFIX)]}_{suffix}")


def parse_svd(root: ET.Element, default_name: str) -> DeviceDescription:
    """Build a description from a parsed <device> element.

    A GPIO peripheral without a port suffix is recorded against the GPIO
    family only; the other families still generate.

    Raises:
        ConfigurationError: On a wrong root element or an unnamed peripheral
    """
    if root.tag != "device":
        raise ConfigurationError("device", f"expected <device> root element, got <{root.tag}>")

    gpio_ports: list[GpioPort] = []
    spi_instances: list[SpiInstance] = []
    load_errors: list[tuple[str, ConfigurationError]] = []

    for index, peripheral in enumerate(root.findall("./peripherals/peripheral")):
        name = _text(peripheral, "name")
        if not name:
            raise ConfigurationError(f"peripherals[{index}]", "peripheral has no <name>")

        lowered = name.lower()
        if lowered.startswith(GPIO_PREFIX):
            try:
                gpio_ports.append(gpio_port_from_peripheral(name))
            except ConfigurationError as exc:
                load_errors.append(("gpio", exc))
        elif lowered.startswith(SPI_PREFIX):
            spi_instances.append(SpiInstance(struct_name=name))

    return DeviceDescription(
        name=_text(root, "name") or default_name,
        gpio_ports=tuple(gpio_ports),
        spi_instances=tuple(spi_instances),
        load_errors=tuple(load_errors),
    )


def load_svd_description(path: Union[str, Path]) -> DeviceDescription:
    """Load a device description from an SVD file.

    Raises:
        ConfigurationError: on read or XML parse errors
    """
    p = Path(path)
    try:
        tree = ET.parse(p)
    except OSError as exc:
        raise ConfigurationError(f"Failed to read SVD file {p}: {exc}") from exc
    except ET.ParseError as exc:
        raise ConfigurationError(f"Failed to parse SVD file {p}: {exc}") from exc

    return parse_svd(tree.getroot(), default_name=p.stem)
