"""Peripheral family registry.

Provides discovery of peripheral family implementations that are
registered globally during module initialization.

Family implementations call register_family() in their package's
__init__.py, so importing periphgen.gpio or periphgen.spi is enough to
make the family available to the generator and the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from periphgen.core.exceptions import UnknownFamilyError

if TYPE_CHECKING:
    from periphgen.interfaces.family import PeripheralFamily


class FamilyRegistry:
    """Registry of available peripheral families, in registration order.

    THREAD SAFETY: Not thread-safe. All family registration should happen
    during module initialization before any threads are spawned.
    """

    def __init__(self):
        self._families: dict[str, PeripheralFamily] = {}

    def register(self, family: PeripheralFamily) -> None:
        """Register a family instance under its name."""
        if family.name in self._families:
            raise ValueError(f"Family '{family.name}' already registered")
        self._families[family.name] = family

    def get(self, name: str) -> PeripheralFamily:
        """Get a family by name."""
        if name not in self._families:
            raise UnknownFamilyError(name, list(self._families.keys()))
        return self._families[name]

    def list_families(self) -> list[str]:
        """List all registered family names."""
        return list(self._families.keys())


# Global registry
_REGISTRY = FamilyRegistry()


def register_family(family: PeripheralFamily) -> None:
    """Register a family globally."""
    _REGISTRY.register(family)


def get_family(name: str) -> PeripheralFamily:
    """Get a registered family by name."""
    return _REGISTRY.get(name)


def list_available_families() -> list[str]:
    """List all registered families."""
    return _REGISTRY.list_families()


def verify_families_registered() -> None:
    """Verify that at least one family is registered.

    Raises:
        RuntimeError: If no families are registered
    """
    if not list_available_families():
        raise RuntimeError(
            "No peripheral families registered! Ensure family modules are imported. "
            "Example: import periphgen.gpio"
        )
