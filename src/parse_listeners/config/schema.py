from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ListenerSettings(BaseModel):
    """One listener entry in a manifest."""

    type: Literal["console", "logging", "diagnostic", "collecting", "noop"]

    stream: Literal["stderr", "stdout"] = "stderr"
    level: int | str = "WARNING"
    logger: str | None = None
    templates: dict[str, str] = Field(default_factory=dict)
    exact_only: bool = True

    @field_validator("level")
    @classmethod
    def validate_level(cls, level: int | str) -> int | str:
        if isinstance(level, int):
            if level < 0:
                raise ValueError(f"Log level must not be negative: {level}")
            return level
        normalized = level.upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {level}")
        return normalized


class ListenerManifest(BaseModel):
    """The listeners.yaml schema."""

    listeners: list[ListenerSettings]

    @field_validator("listeners")
    @classmethod
    def validate_listeners(
        cls, listeners: list[ListenerSettings]
    ) -> list[ListenerSettings]:
        if not listeners:
            raise ValueError("At least one listener must be configured")
        return listeners
