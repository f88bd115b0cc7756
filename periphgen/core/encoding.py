"""Register bit-field encoding tables.

Every hardware enumeration is declared once as an enum class (see
gpio_enums and spi_enums). This module turns those classes into plain
tables the emitter can render, and validates that each table is a
faithful register encoding: one explicit, unique, in-range integer per
variant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Optional, Type

from periphgen.core.exceptions import EncodingIntegrityError


class RegisterEnum(IntEnum):
    """Enumeration whose member values are register bit-field encodings.

    The integer value, not the member name, is the contract with hardware.
    """

    def val(self) -> int:
        """Return the raw integer to program into the register field."""
        return int(self)


@dataclass(frozen=True)
class Variant:
    """One named variant and its register value (None for logical tags)."""

    name: str
    value: Optional[int]


@dataclass(frozen=True)
class HardwareEnumeration:
    """Source-of-truth table for one hardware enumeration.

    Attributes:
        name: Class name used in generated code.
        doc: Class docstring used in generated code.
        variants: Variants in declaration order, aliases included.
        field_width: Width of the register field in bits.
        encoded: False for logical tags that have no register encoding.
        binary_literals: Render values as 0b literals padded to field_width.
        helpers: Extra method source appended to the generated class body.
    """

    name: str
    doc: str
    variants: tuple[Variant, ...]
    field_width: int = 1
    encoded: bool = True
    binary_literals: bool = False
    helpers: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_enum(
        cls,
        enum_cls: Type[Enum],
        field_width: int = 1,
        binary_literals: bool = False,
        helpers: Iterable[str] = (),
    ) -> HardwareEnumeration:
        """Build a table from an enum class.

        Classes deriving from IntEnum are encoded; any other Enum is treated
        as a set of logical tags. Aliases are kept so that duplicate values
        show up in validate().
        """
        encoded = issubclass(enum_cls, IntEnum)
        variants = tuple(
            Variant(name=name, value=int(member.value) if encoded else None)
            for name, member in enum_cls.__members__.items()
        )
        return cls(
            name=enum_cls.__name__,
            doc=_summary(enum_cls.__doc__),
            variants=variants,
            field_width=field_width,
            encoded=encoded,
            binary_literals=binary_literals,
            helpers=tuple(helpers),
        )

    def values(self) -> dict[str, Optional[int]]:
        """Return the variant name to value mapping."""
        return {v.name: v.value for v in self.variants}

    def lookup(self, name: str) -> Optional[int]:
        """Return the encoding of one variant.

        Raises:
            KeyError: If the variant does not exist
        """
        for variant in self.variants:
            if variant.name == name:
                return variant.value
        raise KeyError(f"{self.name} has no variant '{name}'")

    def literal(self, value: int) -> str:
        """Render value the way it is written in generated source."""
        if self.binary_literals:
            return f"0b{value:0{self.field_width}b}"
        return str(value)

    def validate(self) -> None:
        """Check the table is a usable register encoding.

        Raises:
            EncodingIntegrityError: On empty tables, missing or negative
                values, values wider than the field, or duplicate values.
        """
        if not self.variants:
            raise EncodingIntegrityError(self.name, "enumeration has no variants")
        if self.field_width < 1:
            raise EncodingIntegrityError(self.name, f"invalid field width {self.field_width}")

        names: set[str] = set()
        seen: dict[int, str] = {}
        limit = 1 << self.field_width

        for variant in self.variants:
            if variant.name in names:
                raise EncodingIntegrityError(self.name, f"variant '{variant.name}' declared twice")
            names.add(variant.name)

            if not self.encoded:
                if variant.value is not None:
                    raise EncodingIntegrityError(
                        self.name, f"logical tag '{variant.name}' must not carry a value"
                    )
                continue

            if variant.value is None:
                raise EncodingIntegrityError(
                    self.name, f"variant '{variant.name}' has no explicit encoding"
                )
            if variant.value < 0:
                raise EncodingIntegrityError(
                    self.name, f"variant '{variant.name}' has negative encoding {variant.value}"
                )
            if variant.value >= limit:
                raise EncodingIntegrityError(
                    self.name,
                    f"variant '{variant.name}' = {variant.value} does not fit "
                    f"a {self.field_width}-bit field",
                )
            if variant.value in seen:
                raise EncodingIntegrityError(
                    self.name,
                    f"variants '{seen[variant.value]}' and '{variant.name}' "
                    f"share encoding {variant.value}",
                    details={"value": variant.value},
                )
            seen[variant.value] = variant.name


def _summary(docstring: Optional[str]) -> str:
    lines = (docstring or "").strip().splitlines()
    return lines[0] if lines else ""


def validate_catalog(catalog: Iterable[HardwareEnumeration]) -> tuple[HardwareEnumeration, ...]:
    """Validate every enumeration of a family catalog.

    Returns:
        The catalog as a tuple, in declaration order.

    Raises:
        EncodingIntegrityError: If any table is invalid or two enumerations
            share a name.
    """
    result = tuple(catalog)
    names: set[str] = set()
    for enumeration in result:
        if enumeration.name in names:
            raise EncodingIntegrityError(enumeration.name, "enumeration declared twice in catalog")
        names.add(enumeration.name)
        enumeration.validate()
    return result
