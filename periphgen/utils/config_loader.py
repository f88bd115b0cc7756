"""Helpers for loading and validating device descriptions.

A YAML description lists the peripherals of one device:

    device: STM32F303
    gpio:
      - name: GpioA
      - name: GpioB
    spi:
      - struct_name: Spi1

SVD files are handled by periphgen.utils.svd_loader; load_description()
dispatches on the file suffix.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Union

import yaml  # type: ignore[import-untyped]

from periphgen.core.exceptions import ConfigurationError
from periphgen.interfaces.description import DeviceDescription, GpioPort, SpiInstance
from periphgen.utils.svd_loader import load_svd_description

YAML_SUFFIXES = (".yaml", ".yml")
SVD_SUFFIXES = (".svd", ".xml")

# Description cache with thread safety
_LOADER_CACHE: dict[str, DeviceDescription] = {}
_CACHE_LOCK = threading.RLock()


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigurationError(f"Failed to read description {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse description: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("description root must be a mapping")
    return raw


def _build_entries(raw: Any, section: str, key: str) -> list[str]:
    """Read the identifiers of one family section."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ConfigurationError(section, "must be a list of mappings")

    identifiers = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict) or key not in entry:
            raise ConfigurationError(f"{section}[{index}]", f"missing required key '{key}'")
        value = entry[key]
        if value is None:
            value = ""
        elif not isinstance(value, str):
            raise ConfigurationError(
                f"{section}[{index}].{key}",
                f"must be a string, got {type(value).__name__}",
            )
        identifiers.append(value)
    return identifiers


def _parse_description_from_dict(raw: dict[str, Any], default_name: str) -> DeviceDescription:
    name = raw.get("device", default_name)
    if name is None or not str(name).strip():
        raise ConfigurationError("device", "device name must not be empty")

    return DeviceDescription(
        name=str(name),
        gpio_ports=tuple(GpioPort(name=n) for n in _build_entries(raw.get("gpio"), "gpio", "name")),
        spi_instances=tuple(
            SpiInstance(struct_name=n)
            for n in _build_entries(raw.get("spi"), "spi", "struct_name")
        ),
    )


def load_yaml_description(path: Union[str, Path]) -> DeviceDescription:
    """Load a device description from a YAML file.

    Missing `device` defaults to the file stem; missing `gpio` or `spi`
    sections mean the device has no instances of that family.

    Raises:
        ConfigurationError: on read, parse or schema errors
    """
    p = Path(path)
    raw = _load_yaml_file(p)
    return _parse_description_from_dict(raw, default_name=p.stem)


def load_description(path: Union[str, Path]) -> DeviceDescription:
    """Load a device description, choosing the format from the file suffix.

    Args:
        path: .yaml/.yml description or .svd/.xml CMSIS-SVD file.

    Raises:
        ConfigurationError: on unsupported suffixes, parse or schema errors
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix in YAML_SUFFIXES:
        return load_yaml_description(p)
    if suffix in SVD_SUFFIXES:
        return load_svd_description(p)
    raise ConfigurationError(
        str(p), f"unsupported description format '{suffix}'"
    )


def get_description(path: Union[str, Path], reload: bool = False) -> DeviceDescription:
    """Return the description at path, loading and caching if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    key = str(Path(path).resolve())
    with _CACHE_LOCK:
        if reload or key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_description(path)
        return _LOADER_CACHE[key]


def clear_description_cache() -> None:
    """Clear all cached descriptions.

    All subsequent calls to get_description() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
