"""Source emission for generated family packages.

Rendering is plain string assembly: every function here is a pure
function of its arguments, so generating twice from the same input gives
byte-identical text.

Family modules bind the enum module as ``_enum`` and import their instance
submodules last. Sanitized submodule names are lowercase, so an instance
called ``int`` or ``auto`` never shadows a name the generated code uses.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from periphgen.core.encoding import HardwareEnumeration
from periphgen.core.submodules import SubmoduleDeclaration

GENERATED_NOTICE = "Generated by periphgen. Do not edit."

INDENT = "    "

ENUM_IMPORT = "import enum as _enum"

REGISTER_ENUM_BASE = '''class RegisterEnum(_enum.IntEnum):
    """Register field value; val() is the integer written to hardware."""

    def val(self) -> int:
        return self.value'''


def render_docstring(summary: str) -> list[str]:
    summary = summary.replace("\\", "/").replace('"""', "'''")
    return ['"""' + summary, "", GENERATED_NOTICE, '"""']


def render_enumeration(enumeration: HardwareEnumeration) -> list[str]:
    """Render one enumeration as class source lines."""
    base = "RegisterEnum" if enumeration.encoded else "_enum.Enum"
    lines = [f"class {enumeration.name}({base}):"]
    if enumeration.doc:
        lines += [f'{INDENT}"""{enumeration.doc}"""', ""]

    for variant in enumeration.variants:
        if enumeration.encoded:
            # validated tables always carry a value here
            value = enumeration.literal(variant.value)  # type: ignore[arg-type]
        else:
            value = "_enum.auto()"
        lines.append(f"{INDENT}{variant.name} = {value}")

    for helper in enumeration.helpers:
        lines.append("")
        lines.extend(helper.rstrip("\n").splitlines())

    return lines


def _all_block(names: Iterable[str]) -> list[str]:
    return ["__all__ = ["] + [f'{INDENT}"{name}",' for name in names] + ["]"]


def exported_names(catalog: Sequence[HardwareEnumeration]) -> list[str]:
    """Names a family module defines, in emission order."""
    return ["RegisterEnum"] + [e.name for e in catalog]


def render_family_module(
    doc: str,
    declarations: Sequence[SubmoduleDeclaration],
    catalog: Sequence[HardwareEnumeration],
) -> str:
    """Render a family's aggregate module.

    Layout: docstring, enum import, __all__, the RegisterEnum base, every
    enumeration of the catalog, then one submodule declaration per
    instance. Submodules come last because each of them re-imports the
    enumerations from this module.
    """
    lines = render_docstring(doc)
    lines += ["", ENUM_IMPORT, ""]
    lines += _all_block(exported_names(catalog) + [d.module_name for d in declarations])

    lines += ["", ""] + REGISTER_ENUM_BASE.splitlines()
    for enumeration in catalog:
        lines += ["", ""] + render_enumeration(enumeration)

    if declarations:
        lines += ["", ""]
        lines += [d.import_line for d in declarations]

    return "\n".join(lines) + "\n"


def render_submodule(
    doc: str,
    declaration: SubmoduleDeclaration,
    catalog: Sequence[HardwareEnumeration],
) -> str:
    """Render the module of one peripheral instance.

    The module re-exports the family enumerations next to the instance
    NAME and FAMILY.
    """
    lines = render_docstring(doc)
    lines += ["", "from . import ("]
    lines += [f"{INDENT}{name}," for name in exported_names(catalog)]
    lines += [
        ")",
        "",
        f"NAME = {declaration.original!r}",
        f"FAMILY = {declaration.parent_path!r}",
    ]
    return "\n".join(lines) + "\n"


def render_device_package(device_name: str, families: Sequence[str]) -> str:
    """Render the device package __init__ listing the generated families."""
    lines = render_docstring(f"Register enumerations for {device_name}.")
    if families:
        lines.append("")
        lines += [f"from . import {name}" for name in families]
    lines.append("")
    lines += _all_block(families)
    return "\n".join(lines) + "\n"
