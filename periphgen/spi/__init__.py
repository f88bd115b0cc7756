"""SPI family (auto-registers when imported)."""

from periphgen.core.registry import register_family
from periphgen.spi.family import SpiFamily

register_family(SpiFamily())

__all__ = ["SpiFamily"]
