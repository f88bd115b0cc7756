"""
Pytest configuration and shared fixtures for the periphgen test suite.
"""

import importlib
import sys
import uuid
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'periphgen' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from periphgen.interfaces.description import DeviceDescription, GpioPort, SpiInstance  # noqa: E402

GPIO_PORTS = ["GpioA", "GpioB", "GpioC", "GpioD", "GpioF"]

SPI_INSTANCES = ["SPI1", "SPI2", "SPI3"]

SVD_TEMPLATE = """<?xml version="1.0"?>
<device schemaVersion="1.1" xmlns:xs="http://www.w3.org/2001/XMLSchema-instance">
  <name>{device}</name>
  <peripherals>
{peripherals}
  </peripherals>
</device>
"""


def make_svd(device, peripheral_names):
    peripherals = "\n".join(
        f"    <peripheral><name>{name}</name><baseAddress>0x40000000</baseAddress></peripheral>"
        for name in peripheral_names
    )
    return SVD_TEMPLATE.format(device=device, peripherals=peripherals)


@pytest.fixture
def stm32_description():
    """A description with several GPIO ports and SPI instances."""
    return DeviceDescription(
        name="STM32F303",
        gpio_ports=tuple(GpioPort(name=n) for n in GPIO_PORTS),
        spi_instances=tuple(SpiInstance(struct_name=n) for n in SPI_INSTANCES),
    )


@pytest.fixture
def empty_description():
    """A device without any GPIO port or SPI instance."""
    return DeviceDescription(name="Bare")


@pytest.fixture
def valid_description_dict():
    """
    Fixture providing a complete valid YAML description dictionary.
    """
    return {
        "device": "STM32F303",
        "gpio": [{"name": n} for n in GPIO_PORTS],
        "spi": [{"struct_name": n} for n in SPI_INSTANCES],
    }


@pytest.fixture
def temp_yaml_file(tmp_path):
    """
    Fixture that provides a path for a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    yield tmp_path / "device.yaml"


@pytest.fixture
def temp_description_yaml_file(temp_yaml_file, valid_description_dict):
    """
    Fixture that creates a temporary YAML file with a valid description.
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_description_dict, f)

    yield temp_yaml_file


@pytest.fixture
def temp_svd_file(tmp_path):
    """
    Fixture that creates a temporary SVD file with GPIO, SPI and other peripherals.
    """
    path = tmp_path / "STM32F303.svd"
    path.write_text(
        make_svd("STM32F303", ["RCC", "GPIOA", "GPIOB", "SPI1", "USART1", "SPI2"]),
        encoding="utf-8",
    )
    yield path


@pytest.fixture
def import_generated(tmp_path, monkeypatch):
    """
    Fixture that writes generated files as a package and imports it.

    Returns a function taking a relative path -> content mapping and the
    dotted module (relative to the package) to import.
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    packages = []

    def _import(files, module=""):
        package = f"generated_{uuid.uuid4().hex}"
        root = tmp_path / package
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        packages.append(package)
        importlib.invalidate_caches()
        name = f"{package}.{module}" if module else package
        return importlib.import_module(name)

    yield _import

    for package in packages:
        for name in [m for m in sys.modules if m == package or m.startswith(package + ".")]:
            del sys.modules[name]


@pytest.fixture
def svd_text():
    """
    Fixture returning a function that renders a minimal SVD document.
    """
    return make_svd
