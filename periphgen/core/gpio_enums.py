"""GPIO enumeration types.

Values are the register bit-field encodings of the GPIO port block
(MODER/PUPDR/OTYPER/OSPEEDR/ODR family). They are constants of the
peripheral IP, identical on every chip that carries it.
"""

from __future__ import annotations

import inspect

from periphgen.core.encoding import HardwareEnumeration, RegisterEnum


class DigitalValue(RegisterEnum):
    """Digital logic level of a GPIO pin.

    ``True`` means logic high.
    """

    HIGH = 1
    """Logic level HIGH (ODR/IDR bit set)."""

    LOW = 0
    """Logic level LOW (ODR/IDR bit clear)."""

    @classmethod
    def from_bool(cls, value: bool) -> "DigitalValue":
        """Map ``True`` to HIGH and ``False`` to LOW."""
        return cls.HIGH if value else cls.LOW

    def as_bool(self) -> bool:
        """Return ``True`` for HIGH and ``False`` for LOW."""
        return self is DigitalValue.HIGH


class PullDirection(RegisterEnum):
    """Internal pull resistor selection (PUPDR, 2 bits per pin)."""

    FLOATING = 0b00
    """No pull-up or pull-down."""

    UP = 0b01
    """Internal pull-up resistor."""

    DOWN = 0b10
    """Internal pull-down resistor."""


class OutputType(RegisterEnum):
    """Output driver type (OTYPER, 1 bit per pin)."""

    PUSH_PULL = 0
    """Output actively driven both high and low."""

    OPEN_DRAIN = 1
    """Output only sinks current; high level needs a pull-up."""


class OutputSpeed(RegisterEnum):
    """Output slew rate (OSPEEDR, 2 bits per pin).

    0b10 is not a distinct speed on this block; HIGH is 0b11.
    """

    LOW = 0b00
    """Low speed."""

    MEDIUM = 0b01
    """Medium speed."""

    HIGH = 0b11
    """High speed."""


# Generated DigitalValue classes carry these methods, copied from the source above.
DIGITAL_VALUE_HELPERS = tuple(
    inspect.getsource(method) for method in (DigitalValue.from_bool, DigitalValue.as_bool)
)


def gpio_catalog() -> tuple[HardwareEnumeration, ...]:
    """Return the GPIO enumeration tables in emission order."""
    return (
        HardwareEnumeration.from_enum(DigitalValue, helpers=DIGITAL_VALUE_HELPERS),
        HardwareEnumeration.from_enum(PullDirection, field_width=2, binary_literals=True),
        HardwareEnumeration.from_enum(OutputType),
        HardwareEnumeration.from_enum(OutputSpeed, field_width=2, binary_literals=True),
    )
