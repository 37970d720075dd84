"""Listener manifests: YAML schema and loader."""

from parse_listeners.config.loader import (
    build_listener,
    build_listeners,
    load_listeners,
    load_manifest,
)
from parse_listeners.config.schema import ListenerManifest, ListenerSettings

__all__ = [
    "ListenerManifest",
    "ListenerSettings",
    "load_manifest",
    "build_listener",
    "build_listeners",
    "load_listeners",
]
