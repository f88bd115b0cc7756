"""GPIO family (auto-registers when imported)."""

from periphgen.core.registry import register_family
from periphgen.gpio.family import GpioFamily

register_family(GpioFamily())

__all__ = ["GpioFamily"]
