import os
import math
from dataclasses import dataclass

DEFAULT_GATEKEEPER_URL = "https://dec-2024-mini-challenge.csit-events.sg/api/gatekeeper/access"
DEFAULT_SECRET = "Plush123!"
DEFAULT_TOY_NAMES = ("Plush", "TeddyBear", "Doll", "RaceCar", "ActionFigure")


def _split_csv(raw):
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _parse_timeout(raw):
    timeout = float(raw)
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"RELAY_TIMEOUT must be a finite number of seconds greater than 0, got {raw!r}")
    return timeout


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the relay."""

    port: int = 8080
    gatekeeper_url: str = DEFAULT_GATEKEEPER_URL
    relay_timeout: float = 15.0
    secret: str = DEFAULT_SECRET
    toy_names: tuple = DEFAULT_TOY_NAMES
    frontend_origins: tuple = ("*",)
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    return Settings(
        port=int(os.getenv("PORT", "8080")),
        gatekeeper_url=os.getenv("GATEKEEPER_URL", DEFAULT_GATEKEEPER_URL),
        relay_timeout=_parse_timeout(os.getenv("RELAY_TIMEOUT", "15")),
        secret=os.getenv("GATEKEEPER_SECRET", DEFAULT_SECRET),
        toy_names=_split_csv(os.getenv("TOY_NAMES", ",".join(DEFAULT_TOY_NAMES))),
        frontend_origins=_split_csv(os.getenv("FRONTEND_ORIGIN", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
