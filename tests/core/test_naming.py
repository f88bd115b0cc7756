import pytest

from periphgen.core.exceptions import EmptyIdentifierError
from periphgen.core.naming import sanitize_name, split_words


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("PortA", "port_a"),
        ("PortB", "port_b"),
        ("Port-A", "port_a"),
        ("port_a", "port_a"),
        ("GPIOA", "gpioa"),
        ("GPIO_A", "gpio_a"),
        ("gpio_b", "gpio_b"),
        ("SPI1", "spi1"),
        ("Spi1", "spi1"),
        ("SPIController", "spi_controller"),
        ("Spi1Bus", "spi1_bus"),
        ("I2C1", "i2c1"),
        ("  Port  A  ", "port_a"),
        ("port--a__b", "port_a_b"),
    ],
)
def test_sanitize_name(identifier, expected):
    assert sanitize_name(identifier) == expected


def test_sanitize_name_is_deterministic():
    assert sanitize_name("SPIController") == sanitize_name("SPIController")


def test_split_words():
    assert split_words("SPIControllerA-b") == ["SPI", "Controller", "A", "b"]


@pytest.mark.parametrize("identifier", ["", "   ", None])
def test_empty_identifier_raises(identifier):
    with pytest.raises(EmptyIdentifierError) as exc_info:
        sanitize_name(identifier, index=4)
    assert exc_info.value.index == 4


@pytest.mark.parametrize("identifier", ["gpio.a", "gpio::a", "gpio/a", "gpio\\a"])
def test_module_path_separator_raises(identifier):
    with pytest.raises(EmptyIdentifierError) as exc_info:
        sanitize_name(identifier)
    assert "separator" in exc_info.value.reason


@pytest.mark.parametrize(
    "identifier, reason",
    [
        ("---", "no alphanumeric"),
        ("1Wire", "digit"),
        ("Import", "reserved"),
    ],
)
def test_unsanitizable_identifier_raises(identifier, reason):
    with pytest.raises(EmptyIdentifierError) as exc_info:
        sanitize_name(identifier, index=0)
    assert reason in exc_info.value.reason
    assert exc_info.value.identifier == identifier
