"""Unified configuration for the POS sales heatmap.

This module provides a single, simple configuration class used by the
aggregator, the colorizer and the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pos_heatmap.exceptions import ConfigError

LOCATION_ORDERS = ("first_seen", "alphabetical")

DEFAULT_CONTRAST_EXPONENT = 0.5


@dataclass(frozen=True)
class ColumnHeaders:
    """Exact header strings looked up in the first input row.

    Matching is case-sensitive and ignores surrounding whitespace.
    """

    location: str = "POS location name"
    day: str = "Day"
    variant: str = "Product variant title at time of sale"
    product: str = "Product title at time of sale"
    quantity: str = "Net items sold"
    gross_sales: str = "Gross Sales"
    net_sales: str = "Total sales"

    @property
    def required(self) -> tuple[str, ...]:
        """Headers without which no pivot can be built."""
        return (self.location, self.day, self.quantity)


@dataclass
class ReportConfig:
    """Settings for one report run.

    Attributes:
        timezone: IANA timezone used to label timezone-aware dates. None labels
            them in UTC. Naive dates are taken as already local either way.
        contrast_exponent: Exponent applied to the per-row ratio before colour
            blending. Values below 1 make small magnitudes more visible.
        location_order: "first_seen" (input order) or "alphabetical".
        headers: Header names to resolve against the input header row.
    """

    timezone: str | None = None
    contrast_exponent: float = DEFAULT_CONTRAST_EXPONENT
    location_order: str = "first_seen"
    headers: ColumnHeaders = field(default_factory=ColumnHeaders)

    def __post_init__(self) -> None:
        if self.timezone:
            try:
                ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigError(f"Unknown timezone '{self.timezone}'") from e
        if not 0 < self.contrast_exponent <= 1:
            raise ConfigError(
                f"contrast_exponent must be in (0, 1], got {self.contrast_exponent}"
            )
        if self.location_order not in LOCATION_ORDERS:
            raise ConfigError(
                f"Invalid location_order '{self.location_order}'. "
                f"Must be one of: {', '.join(LOCATION_ORDERS)}."
            )

    @property
    def zone(self) -> ZoneInfo | None:
        """ZoneInfo for the configured timezone, if any."""
        return ZoneInfo(self.timezone) if self.timezone else None

    @classmethod
    def from_env(cls, **overrides: object) -> ReportConfig:
        """Create a ReportConfig from POS_HEATMAP_* environment variables.

        Keyword overrides that are not None take precedence over the
        environment.

        Examples:
            >>> config = ReportConfig.from_env(timezone="America/New_York")
            >>> config.location_order
            'first_seen'
        """
        values: dict[str, object] = {}
        if os.environ.get("POS_HEATMAP_TIMEZONE"):
            values["timezone"] = os.environ["POS_HEATMAP_TIMEZONE"]
        if os.environ.get("POS_HEATMAP_CONTRAST"):
            raw = os.environ["POS_HEATMAP_CONTRAST"]
            try:
                values["contrast_exponent"] = float(raw)
            except ValueError as e:
                raise ConfigError(f"POS_HEATMAP_CONTRAST is not a number: {raw!r}") from e
        if os.environ.get("POS_HEATMAP_LOCATION_ORDER"):
            values["location_order"] = os.environ["POS_HEATMAP_LOCATION_ORDER"]

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)  # type: ignore[arg-type]
