"""Interface abstractions for the generator.

- DeviceDescription, GpioPort, SpiInstance: input records
- PeripheralDescriptor: anything naming one peripheral instance
- PeripheralFamily: family contract (abstract base class)
"""

from periphgen.interfaces.description import (
    DeviceDescription,
    GpioPort,
    PeripheralDescriptor,
    SpiInstance,
)
from periphgen.interfaces.family import PeripheralFamily

__all__ = [
    "DeviceDescription",
    "GpioPort",
    "PeripheralDescriptor",
    "SpiInstance",
    "PeripheralFamily",
]
