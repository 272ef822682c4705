"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field
from typing import Literal


def _parse_suit_paths() -> dict[str, str]:
    """Parse SUIT_PATHS environment variable ("hearts=Cards/Hearts,...")."""
    defaults = {
        "hearts": "Cards/Hearts",
        "spades": "Cards/Spades",
        "diamonds": "Cards/Diamonds",
        "clubs": "Cards/Clubs",
    }
    raw = os.getenv("SUIT_PATHS", "")
    for entry in raw.split(","):
        suit, sep, path = entry.partition("=")
        if sep and suit.strip() and path.strip():
            defaults[suit.strip().lower()] = path.strip()
    return defaults


@dataclass(frozen=True)
class HandSettings:
    """Hand dealing and layout configuration."""

    hand_size: int = field(default_factory=lambda: int(os.getenv("HAND_SIZE", "10")))
    seed: int = field(default_factory=lambda: int(os.getenv("HAND_SEED", "0")))  # 0 = non-deterministic
    spacing: float = field(
        default_factory=lambda: float(os.getenv("HAND_SPACING", "-120"))
    )  # Negative overlaps cards
    fan_angle: float = field(
        default_factory=lambda: float(os.getenv("HAND_FAN_ANGLE", "8"))
    )  # Degrees per card
    layout_mode: Literal["row", "manual"] = field(
        default_factory=lambda: os.getenv("HAND_LAYOUT_MODE", "row").lower()  # type: ignore[arg-type]
    )
    card_width: float = field(default_factory=lambda: float(os.getenv("CARD_WIDTH", "140")))


@dataclass(frozen=True)
class CatalogueConfig:
    """Where the host application finds each suit's artwork."""

    suit_paths: dict[str, str] = field(default_factory=_parse_suit_paths)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    hand: HandSettings = field(default_factory=HandSettings)
    catalogue: CatalogueConfig = field(default_factory=CatalogueConfig)

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Configure root logging for a host application."""
    app_config = app_config or config
    logging.basicConfig(
        level=app_config.effective_log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# Global configuration instance
config = AppConfig()
