from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import yaml

from reversi.ai import Difficulty
from reversi.core import Player
from reversi.session import GameMode, GameSession

E = TypeVar("E", bound=Enum)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    pass


def _parse_enum(enum_cls: Type[E], raw: Any, key: str) -> E:
    if isinstance(raw, enum_cls):
        return raw
    text = str(raw).strip()
    for member in enum_cls:
        if text.lower() in (member.name.lower(), str(member.value).lower()):
            return member
    choices = ", ".join(member.name.lower() for member in enum_cls)
    raise ConfigError(f"Invalid {key} {raw!r}; expected one of: {choices}")


@dataclass
class GameConfig:
    mode: GameMode = GameMode.HUMAN_VS_COMPUTER
    difficulty: Difficulty = Difficulty.BEGINNER
    ai_player: Player = Player.WHITE
    ai_delay: float = 0.5
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not math.isfinite(self.ai_delay) or self.ai_delay < 0:
            raise ConfigError(f"ai_delay must be a finite non-negative number, got {self.ai_delay!r}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level {self.log_level!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        unknown = set(data) - {"mode", "difficulty", "ai_player", "ai_delay", "log_level"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        defaults = cls()
        try:
            ai_delay = float(data.get("ai_delay", defaults.ai_delay))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid ai_delay {data.get('ai_delay')!r}") from exc

        return cls(
            mode=_parse_enum(GameMode, data.get("mode", defaults.mode), "mode"),
            difficulty=_parse_enum(Difficulty, data.get("difficulty", defaults.difficulty), "difficulty"),
            ai_player=_parse_enum(Player, data.get("ai_player", defaults.ai_player), "ai_player"),
            ai_delay=ai_delay,
            log_level=str(data.get("log_level", defaults.log_level)),
        )

    def new_session(self) -> GameSession:
        return GameSession(mode=self.mode, difficulty=self.difficulty, ai_player=self.ai_player)


def load_config(path: Optional[Union[str, Path]]) -> GameConfig:
    if path is None:
        return GameConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return GameConfig()
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{cfg_path} must contain a mapping at the top level")
    return GameConfig.from_dict(data)
