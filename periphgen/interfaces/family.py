"""Peripheral family interface.

A family (GPIO, SPI, ...) knows which descriptors of a device belong to it
and which hardware enumerations it emits. Everything else (sanitizing,
collision checks, rendering) is shared and lives in periphgen.core.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from periphgen.core.encoding import HardwareEnumeration
from periphgen.interfaces.description import DeviceDescription, PeripheralDescriptor


class PeripheralFamily(ABC):
    """Abstract peripheral family.

    Subclasses must define:
    - name: package name of the family in generated output
    - module_doc: docstring of the generated aggregate module
    - catalog(): the family's hardware enumerations
    - descriptors(): the family's descriptors within a device description
    """

    name: str
    module_doc: str

    @abstractmethod
    def catalog(self) -> tuple[HardwareEnumeration, ...]:
        """Return the family-wide enumerations in emission order."""
        raise NotImplementedError

    @abstractmethod
    def descriptors(self, description: DeviceDescription) -> Sequence[PeripheralDescriptor]:
        """Return this family's descriptors in description order."""
        raise NotImplementedError

    def identifier_of(self, descriptor: PeripheralDescriptor) -> str:
        """Return the identifier the submodule name is derived from."""
        return descriptor.identifier

    def instance_doc(self, identifier: str) -> str:
        """Docstring of a generated per-instance module."""
        return f"{self.name.upper()} instance {identifier}."
