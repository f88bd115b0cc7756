"""Peripheral identifier sanitizing.

Turns identifiers from a device description into lowercase,
underscore-separated tokens usable as module names:

    PortA          -> port_a
    Port-A         -> port_a
    GPIOA          -> gpioa
    SPIController  -> spi_controller
    Spi1           -> spi1
"""

from __future__ import annotations

import keyword
import re
from typing import Optional

from periphgen.core.exceptions import EmptyIdentifierError

MODULE_PATH_SEPARATORS = ("::", ".", "/", "\\")
"""Separators that would turn one identifier into a nested module path."""

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]+")

# lower|Upper, and the last capital of an acronym (or a digit) before a capitalized word
_WORD_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z0-9])(?=[A-Z][a-z])")


def split_words(identifier: str) -> list[str]:
    """Split an identifier into words on case changes and punctuation."""
    words: list[str] = []
    for chunk in _NON_ALNUM.split(identifier):
        if chunk:
            words.extend(w for w in _WORD_BOUNDARY.split(chunk) if w)
    return words


def sanitize_name(identifier: Optional[str], index: Optional[int] = None) -> str:
    """Return the canonical submodule name for a peripheral identifier.

    Args:
        identifier: Identifier as written in the device description.
        index: Position of the descriptor, used in error reports.

    Returns:
        Lowercase, underscore-separated module name.

    Raises:
        EmptyIdentifierError: If the identifier is empty, contains a module
            path separator, or does not reduce to a valid module name.
    """
    if identifier is None or not identifier.strip():
        raise EmptyIdentifierError(index, identifier)

    for separator in MODULE_PATH_SEPARATORS:
        if separator in identifier:
            raise EmptyIdentifierError(
                index, identifier, f"contains module path separator {separator!r}"
            )

    name = "_".join(word.lower() for word in split_words(identifier))

    if not name:
        raise EmptyIdentifierError(index, identifier, "no alphanumeric characters")
    if name[0].isdigit():
        raise EmptyIdentifierError(index, identifier, f"'{name}' starts with a digit")
    if keyword.iskeyword(name):
        raise EmptyIdentifierError(index, identifier, f"'{name}' is a reserved word")

    return name
