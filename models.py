from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class GameMode(str, Enum):
    DAILY = "daily"
    RANDOM = "random"


class GameStatus(str, Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"
    GAVE_UP = "gave_up"


# Persisted DailyOutcome status values
OUTCOME_STATUS = {
    GameStatus.WON: "won",
    GameStatus.LOST: "lost",
    GameStatus.GAVE_UP: "gaveUp",
}


@dataclass(frozen=True)
class Category:
    category: str
    players: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "players", tuple(self.players))


@dataclass(frozen=True)
class PuzzleGroup:
    category: str
    players: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "players", tuple(self.players))

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "players": list(self.players)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PuzzleGroup":
        return cls(category=str(data["category"]), players=tuple(str(p) for p in data["players"]))


@dataclass
class DailyOutcome:
    day: str
    status: str
    found: List[PuzzleGroup] = field(default_factory=list)
    guesses: List[List[str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "status": self.status,
            "found": [group.to_dict() for group in self.found],
            "guesses": [list(guess) for guess in self.guesses],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyOutcome":
        status = data["status"]
        if status not in OUTCOME_STATUS.values():
            raise ValueError(f"Unknown outcome status: {status}")
        return cls(
            day=str(data["day"]),
            status=status,
            found=[PuzzleGroup.from_dict(g) for g in data["found"]],
            guesses=[[str(name) for name in guess] for guess in data["guesses"]],
        )


@dataclass
class Stats:
    last_played_day: Optional[str] = None
    current_streak: int = 0
    best_streak: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "last_played_day": self.last_played_day,
            "current_streak": self.current_streak,
            "best_streak": self.best_streak,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Stats":
        current = int(data["current_streak"])
        best = int(data["best_streak"])
        if current < 0 or best < 0:
            raise ValueError("Streak counters must be non-negative")
        return cls(
            last_played_day=data.get("last_played_day"),
            current_streak=current,
            best_streak=best,
        )


def status_from_outcome(value: str) -> GameStatus:
    for status, stored in OUTCOME_STATUS.items():
        if stored == value:
            return status
    raise ValueError(f"Unknown outcome status: {value}")
