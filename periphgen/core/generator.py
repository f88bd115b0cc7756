"""Generation of family packages from a device description.

Each family is generated independently: sanitize names, build the
submodule list (collision check over the whole set), validate the
enumeration catalog, then render. A failure aborts only the family it
belongs to.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from periphgen.core.emitter import (
    render_device_package,
    render_family_module,
    render_submodule,
)
from periphgen.core.encoding import HardwareEnumeration, validate_catalog
from periphgen.core.exceptions import GenerationError
from periphgen.core.registry import get_family, list_available_families
from periphgen.core.submodules import SubmoduleDeclaration, build_submodules
from periphgen.interfaces.description import DeviceDescription
from periphgen.interfaces.family import PeripheralFamily

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FamilyOutput:
    """Everything generated for one family.

    Attributes:
        family: Family package name.
        declarations: Submodule declarations in description order.
        catalog: Enumerations emitted into the aggregate module.
        files: Relative path -> file text, in emission order.
    """

    family: str
    declarations: tuple[SubmoduleDeclaration, ...]
    catalog: tuple[HardwareEnumeration, ...]
    files: dict[str, str]


@dataclass
class GenerationResult:
    """Outcome of generating every requested family of one device."""

    device: str
    outputs: dict[str, FamilyOutput] = field(default_factory=dict)
    errors: dict[str, GenerationError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def files(self) -> dict[str, str]:
        """All generated files, including the device package __init__."""
        files: dict[str, str] = {}
        for output in self.outputs.values():
            files.update(output.files)
        files["__init__.py"] = render_device_package(self.device, list(self.outputs))
        return files

    def raise_for_errors(self) -> None:
        """Re-raise the first family error, if any."""
        for error in self.errors.values():
            raise error


def generate_family(family: PeripheralFamily, description: DeviceDescription) -> FamilyOutput:
    """Generate the package of one family.

    Raises:
        ConfigurationError: The loader rejected a descriptor of this family.
        EmptyIdentifierError: A descriptor has an unusable identifier.
        NameCollisionError: Two descriptors sanitize to the same name.
        EncodingIntegrityError: The family catalog is malformed.
    """
    error = description.load_error(family.name)
    if error is not None:
        raise error

    identifiers = (family.identifier_of(d) for d in family.descriptors(description))
    declarations = tuple(build_submodules(family.name, identifiers))
    catalog = validate_catalog(family.catalog())

    files = {
        f"{family.name}/__init__.py": render_family_module(
            family.module_doc, declarations, catalog
        )
    }
    for declaration in declarations:
        files[declaration.relative_path] = render_submodule(
            family.instance_doc(declaration.original), declaration, catalog
        )

    logger.debug(
        "%s: %d enumeration(s), %d submodule(s)", family.name, len(catalog), len(declarations)
    )
    return FamilyOutput(
        family=family.name, declarations=declarations, catalog=catalog, files=files
    )


def _resolve_families(names: Optional[Sequence[str]]) -> list[PeripheralFamily]:
    if names is None:
        names = list_available_families()
    return [get_family(name) for name in names]


def generate_device(
    description: DeviceDescription,
    families: Optional[Sequence[str]] = None,
    parallel: bool = False,
) -> GenerationResult:
    """Generate every requested family of a device.

    Families share no state, so they may run on separate threads. Errors
    are collected per family; results keep the requested family order.

    Args:
        description: Device to generate for.
        families: Family names; defaults to every registered family.
        parallel: Generate families on a thread pool.

    Raises:
        UnknownFamilyError: If a requested family is not registered.
    """
    selected = _resolve_families(families)
    result = GenerationResult(device=description.name)

    def run(family: PeripheralFamily) -> Union[FamilyOutput, GenerationError]:
        try:
            return generate_family(family, description)
        except GenerationError as exc:
            logger.error("%s: %s generation failed: %s", description.name, family.name, exc)
            return exc

    if parallel and len(selected) > 1:
        with ThreadPoolExecutor(max_workers=len(selected)) as pool:
            outcomes = list(pool.map(run, selected))
    else:
        outcomes = [run(family) for family in selected]

    for family, outcome in zip(selected, outcomes):
        if isinstance(outcome, GenerationError):
            result.errors[family.name] = outcome
        else:
            result.outputs[family.name] = outcome

    return result
