"""Submodule list building.

Maps the ordered descriptors of one peripheral family to the ordered
submodule declarations of the family's aggregate module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from periphgen.core.exceptions import NameCollisionError
from periphgen.core.naming import sanitize_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmoduleDeclaration:
    """One per-instance submodule of a family package."""

    parent_path: str  # family package, e.g. "gpio"
    module_name: str
    original: str

    @property
    def import_line(self) -> str:
        """Relative import that declares the submodule in its family package."""
        return f"from . import {self.module_name}"

    @property
    def relative_path(self) -> str:
        """File path of the submodule relative to the device package."""
        return f"{self.parent_path}/{self.module_name}.py"


def build_submodules(family: str, identifiers: Iterable[str]) -> list[SubmoduleDeclaration]:
    """Build one declaration per identifier, preserving input order.

    The whole input is consumed before anything is returned, so streamed
    descriptors are checked for collisions as a complete set.

    Args:
        family: Family package name used as parent path and in errors.
        identifiers: Peripheral identifiers in description order.

    Returns:
        Declarations in input order; empty for an empty input.

    Raises:
        EmptyIdentifierError: If an identifier cannot be sanitized.
        NameCollisionError: If two identifiers sanitize to the same name.
    """
    declarations: list[SubmoduleDeclaration] = []
    owners: dict[str, str] = {}

    for index, identifier in enumerate(identifiers):
        module_name = sanitize_name(identifier, index=index)
        if module_name in owners:
            raise NameCollisionError(family, owners[module_name], identifier, module_name)
        owners[module_name] = identifier
        declarations.append(
            SubmoduleDeclaration(parent_path=family, module_name=module_name, original=identifier)
        )

    logger.debug("%s: %d submodule declaration(s)", family, len(declarations))
    return declarations
