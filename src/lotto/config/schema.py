"""Pydantic schema for lotto configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..engine.draw import DrawMultipleOptions


class ParticipantConfig(BaseModel):
    """One initial participant."""

    model_config = ConfigDict(extra="forbid")

    identity: str | int
    tickets: int = Field(default=1, ge=1)


class DrawConfig(BaseModel):
    """Batch draw settings with defaults."""

    model_config = ConfigDict(extra="forbid")

    count: int = Field(default=1, ge=0)
    redrawable: bool = True
    unique: bool = False

    def to_options(self) -> DrawMultipleOptions:
        return DrawMultipleOptions(redrawable=self.redrawable, unique=self.unique)


class LottoConfig(BaseModel):
    """Validated lotto configuration."""

    model_config = ConfigDict(extra="forbid")

    seed: int | None = None
    participants: list[ParticipantConfig] = Field(default_factory=list)
    participants_csv: str | None = None
    draw: DrawConfig = Field(default_factory=DrawConfig)
