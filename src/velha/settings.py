"""Runtime settings for a game session.

Environment-first; command-line flags override what the environment says.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Settings:
    players: int = 1
    line_delay: float = 0.05
    computer_delay: float = 1.0
    seed: Optional[int] = None

    @property
    def computer_plays_x(self) -> bool:
        return self.players == 0

    @property
    def computer_plays_o(self) -> bool:
        return self.players in (0, 1)

    def fast(self) -> "Settings":
        return replace(self, line_delay=0.0, computer_delay=0.0)


def _int_env(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def check_players(players: int) -> int:
    if players not in (0, 1, 2):
        raise ValueError(f"Number of players must be 0, 1 or 2, got {players}")
    return players


def load_settings(
    players: Optional[int] = None,
    seed: Optional[int] = None,
    fast: bool = False,
) -> Settings:
    """Build settings from VELHA_* environment variables, then explicit overrides.

    Order: argument -> env var -> default.
    """
    defaults = Settings()
    env_players = _int_env("VELHA_PLAYERS")
    env_line_ms = _int_env("VELHA_LINE_DELAY_MS")
    env_computer_ms = _int_env("VELHA_COMPUTER_DELAY_MS")
    env_seed = _int_env("VELHA_SEED")

    if players is None:
        players = env_players if env_players is not None else defaults.players
    settings = Settings(
        players=check_players(players),
        line_delay=env_line_ms / 1000.0 if env_line_ms is not None else defaults.line_delay,
        computer_delay=env_computer_ms / 1000.0 if env_computer_ms is not None else defaults.computer_delay,
        seed=seed if seed is not None else env_seed,
    )
    if settings.line_delay < 0 or settings.computer_delay < 0:
        raise ValueError("Delays must not be negative")
    return settings.fast() if fast else settings
