from __future__ import annotations

import logging
from pathlib import Path

import yaml

from parse_listeners.config.schema import ListenerManifest, ListenerSettings
from parse_listeners.exceptions import ConfigurationError
from parse_listeners.listeners import (
    AmbiguityDiagnosticListener,
    CollectingListener,
    CompositeListener,
    ConsoleListener,
    ErrorListener,
    LoggingListener,
    NullListener,
)

logger = logging.getLogger(__name__)


def load_manifest(path: str | Path) -> ListenerManifest:
    """Read and validate a listener manifest.

    Args:
        path: Path to a YAML file with a top-level ``listeners`` list.

    Returns:
        The validated manifest.

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid.
    """
    manifest_path = Path(path)

    if not manifest_path.is_file():
        raise ConfigurationError(
            f"Listener manifest not found: {manifest_path}", source=str(manifest_path)
        )

    try:
        with manifest_path.open("r", encoding="utf-8") as file_handle:
            data = yaml.safe_load(file_handle)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(
            f"Failed to read listener manifest: {exc}", source=str(manifest_path)
        ) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            "Listener manifest must be a mapping", source=str(manifest_path)
        )

    try:
        manifest = ListenerManifest(**data)
    except Exception as exc:
        raise ConfigurationError(
            f"Invalid listener manifest: {exc}", source=str(manifest_path)
        ) from exc

    logger.debug(
        "Loaded %d listener(s) from %s", len(manifest.listeners), manifest_path
    )
    return manifest


def build_listener(settings: ListenerSettings) -> ErrorListener:
    """Create the listener described by one manifest entry."""
    if settings.type == "console":
        return ConsoleListener(settings.stream)

    if settings.type == "logging":
        return LoggingListener(
            logger=settings.logger,
            level=settings.level,
            templates=settings.templates,
        )

    if settings.type == "diagnostic":
        return AmbiguityDiagnosticListener(exact_only=settings.exact_only)

    if settings.type == "collecting":
        return CollectingListener()

    if settings.type == "noop":
        return NullListener()

    raise ConfigurationError(f"Unknown listener type: {settings.type}")


def build_listeners(manifest: ListenerManifest) -> list[ErrorListener]:
    """Create every listener in a manifest, in order."""
    return [build_listener(settings) for settings in manifest.listeners]


def load_listeners(path: str | Path) -> CompositeListener:
    """Load a manifest and wrap its listeners in a CompositeListener."""
    return CompositeListener(build_listeners(load_manifest(path)))
