"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "http://localhost:8000")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _parse_seed() -> int | None:
    """Parse SIMULATION_SEED; unset or empty means unseeded runs."""
    seed = os.getenv("SIMULATION_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = True
    allow_methods: list[str] = field(default_factory=lambda: ["GET", "POST"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting configuration."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "60"))
    )


@dataclass(frozen=True)
class SimulationConfig:
    """Input ranges and defaults for the calculators."""

    # Bankroll simulator
    min_bankroll: float = 100
    max_bankroll: float = 10_000
    default_bankroll: float = 1000
    min_bet: float = 1
    max_bet: float = 200
    default_bet: float = 25
    min_house_edge: float = 0.5
    max_house_edge: float = 20.0
    default_house_edge: float = 2.7
    min_rounds: int = 10
    max_rounds: int = 1000
    default_rounds: int = 200

    # Slots
    min_spins: int = 100
    max_spins: int = 10_000
    default_spins: int = 1000
    min_bet_per_spin: float = 0.1
    max_bet_per_spin: float = 100
    default_bet_per_spin: float = 1

    # Blackjack
    min_hands: int = 10
    max_hands: int = 1000
    default_hands: int = 100

    # Roulette
    max_roulette_bet: float = 1000
    default_roulette_bet: float = 10

    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)


# Global configuration instance
config = AppConfig()
