"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, civtime.toml only contains
overrides.  An empty file (or none at all) means "host zone, no eras".
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from civtime.domain.zone import Era, Zone, custom_zone


class EraConfig(BaseModel):
    """One ``[[zone.eras]]`` entry."""

    model_config = {"frozen": True}

    start: int
    offset: int

    def to_era(self) -> Era:
        return Era(start=self.start, offset=self.offset)


class ZoneConfig(BaseModel):
    """[zone] section.

    ``default_offset`` of None defers to the host's current offset.
    Eras are kept in file order, most recent first by convention.
    """

    model_config = {"frozen": True}

    default_offset: int | None = None
    eras: list[EraConfig] = Field(default_factory=list)

    def to_zone(self, host_offset: int) -> Zone:
        """Build the domain zone, substituting *host_offset* when unset."""
        default = host_offset if self.default_offset is None else self.default_offset
        return custom_zone(default, [era.to_era() for era in self.eras])
