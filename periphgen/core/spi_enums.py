"""SPI enumeration types.

Values are the bit-field encodings of the SPI control registers
(CR1 LSBFIRST/BIDIMODE/CPOL/CPHA/BR). SpiChannelType is a logical
bus-topology tag and has no register encoding.
"""

from enum import Enum, auto

from periphgen.core.encoding import HardwareEnumeration, RegisterEnum


class BitOrder(RegisterEnum):
    """Order in which data bits are shifted out (CR1.LSBFIRST)."""

    MSB_FIRST = 0
    LSB_FIRST = 1


class BidiMode(RegisterEnum):
    """Data line topology (CR1.BIDIMODE)."""

    TWO_LINE_UNIDIRECTIONAL = 0
    """Separate MOSI and MISO lines."""

    ONE_LINE_BIDIRECTIONAL = 1
    """Single shared data line."""


class FrameFormat(RegisterEnum):
    """Frame bit order (CR1.LSBFIRST as seen by the frame format)."""

    MSB_FIRST = 0
    LSB_FIRST = 1


class BaudRateScale(RegisterEnum):
    """Baud rate prescaler applied to the peripheral clock (CR1.BR, 3 bits)."""

    DIV_2 = 0
    DIV_4 = 1
    DIV_8 = 2
    DIV_16 = 3
    DIV_32 = 4
    DIV_64 = 5
    DIV_128 = 6
    DIV_256 = 7


class ClockPolarity(RegisterEnum):
    """SCK level when idle (CR1.CPOL)."""

    IDLE_LOW = 0
    IDLE_HIGH = 1


class ClockPhase(RegisterEnum):
    """Clock edge on which data is captured (CR1.CPHA)."""

    FIRST_TRANSITION = 0
    SECOND_TRANSITION = 1


class SpiChannelType(Enum):
    """Logical bus mode of an SPI channel."""

    FULL_DUPLEX = auto()
    HALF_DUPLEX = auto()
    SIMPLEX_RECEIVE = auto()
    SIMPLEX_TRANSMIT = auto()


def spi_catalog() -> tuple[HardwareEnumeration, ...]:
    """Return the SPI enumeration tables in emission order."""
    return (
        HardwareEnumeration.from_enum(BitOrder),
        HardwareEnumeration.from_enum(BidiMode),
        HardwareEnumeration.from_enum(FrameFormat),
        HardwareEnumeration.from_enum(BaudRateScale, field_width=3),
        HardwareEnumeration.from_enum(ClockPolarity),
        HardwareEnumeration.from_enum(ClockPhase),
        HardwareEnumeration.from_enum(SpiChannelType),
    )
