"""Custom exceptions used throughout the periphgen package."""

from typing import Any, Optional


class GenerationError(Exception):
    """Base exception for all generation errors.

    All periphgen-specific exceptions should inherit from this class.
    This allows catching all generation errors with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(GenerationError):
    """Raised when a device description cannot be loaded.

    This includes:
    - Unreadable or malformed description files
    - Missing required keys
    - Schema validation failures
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The description key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "description".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid device description"
            config_key = "description"
        if config_key is None:
            config_key = "description"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class IdentifierError(GenerationError):
    """Base exception for peripheral identifiers that cannot become module names."""


class EmptyIdentifierError(IdentifierError):
    """Raised when a descriptor carries an empty or unsanitizable identifier.

    Examples:
    - "" or whitespace only
    - "gpio.a" (embedded module-path separator)
    - "1wire" (sanitized form is not a valid module name)
    """

    def __init__(
        self,
        index: Optional[int],
        identifier: Optional[str],
        reason: str = "identifier is empty",
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["index"] = index
        details["identifier"] = identifier

        where = f"descriptor #{index}" if index is not None else "descriptor"
        message = f"Cannot sanitize identifier {identifier!r} of {where}: {reason}"
        super().__init__(message=message, details=details)
        self.index = index
        self.identifier = identifier
        self.reason = reason


class NameCollisionError(IdentifierError):
    """Raised when two descriptors of one family sanitize to the same module name."""

    def __init__(
        self,
        family: str,
        first: str,
        second: str,
        module_name: str,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["family"] = family
        details["identifiers"] = [first, second]
        details["module_name"] = module_name

        message = (
            f"{family}: identifiers {first!r} and {second!r} "
            f"both sanitize to submodule '{module_name}'"
        )
        super().__init__(message=message, details=details)
        self.family = family
        self.first = first
        self.second = second
        self.module_name = module_name


class EncodingIntegrityError(GenerationError):
    """Raised when a hardware enumeration table is malformed.

    Examples:
    - Two variants share one register value
    - A variant has no explicit value in an encoded enumeration
    - A value does not fit the register field width
    """

    def __init__(
        self,
        enumeration: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        details["enumeration"] = enumeration
        super().__init__(message=f"{enumeration}: {message}", details=details)
        self.enumeration = enumeration


class UnknownFamilyError(GenerationError):
    """Raised when a peripheral family name is not registered."""

    def __init__(self, name: str, available: list[str]):
        message = f"Unknown peripheral family '{name}'. Available: {available}"
        super().__init__(message=message, details={"available": available})
        self.name = name
