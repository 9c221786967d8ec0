from typing import Any, Callable, Dict, List, Optional, Set
import random
import time

from catalog import GROUP_COUNT, GROUP_SIZE
from logs import log_message
from models import (
    DailyOutcome,
    GameMode,
    GameStatus,
    OUTCOME_STATUS,
    PuzzleGroup,
    status_from_outcome,
)
from progress import DailyProgressStore
from puzzle_generator import PuzzleGenerator, get_today_date_key
from shuffle import RandomSource, shuffle
from streaks import StreakTracker

TERMINAL_STATUSES = {GameStatus.WON, GameStatus.LOST, GameStatus.GAVE_UP}


class GameSession:
    """
    One play-through of a daily or random puzzle.

    Every operation is total: calls that make no sense in the current state
    (wrong selection size, spent hint budget, finished game) leave the session
    untouched. Only daily games touch the streak tracker and the progress store.
    """

    def __init__(
        self,
        generator: PuzzleGenerator,
        progress: DailyProgressStore,
        streaks: StreakTracker,
        max_incorrect: int = 4,
        max_hints: int = 2,
        random_source: RandomSource = random.random,
        on_win: Optional[Callable[["GameSession"], None]] = None,
        today: Callable[[], str] = get_today_date_key,
        clock: Callable[[], float] = time.time,
    ):
        self.generator = generator
        self.progress = progress
        self.streaks = streaks
        self.max_incorrect = max_incorrect
        self.max_hints = max_hints
        self.random_source = random_source
        self.on_win = on_win
        self.today = today
        self.clock = clock

        self.mode: Optional[GameMode] = None
        self.day: Optional[str] = None
        self.status = GameStatus.IDLE
        self._reset([], "")

    def _reset(self, puzzle: List[PuzzleGroup], puzzle_id: str):
        self.puzzle = puzzle
        self.deck = shuffle([name for group in puzzle for name in group.players], self.random_source)
        self.puzzle_id = puzzle_id
        self.selected: List[str] = []
        self.revealed: Set[str] = set()
        self.hint_revealed: Set[str] = set()
        self.found: List[PuzzleGroup] = []
        self.guesses: List[List[str]] = []
        self.incorrect_count = 0
        self.hints_used = 0
        self.last_hint_category: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def guesses_left(self) -> int:
        return max(self.max_incorrect - self.incorrect_count, 0)

    def remaining(self) -> List[str]:
        return [name for name in self.deck if name not in self.revealed]

    def start(self, mode: GameMode, seed: Optional[str] = None):
        mode = GameMode(mode)
        if mode is GameMode.DAILY:
            day = seed or self.today()
            # Generate first so a failure leaves the current game untouched
            puzzle = self.generator.generate(day)
            self.mode, self.day = mode, day
            self._reset(puzzle, day)
            stored = self.progress.load(day)
            if stored is not None:
                self._restore(stored)
                return
        else:
            puzzle = self.generator.generate(seed)
            self.mode, self.day = mode, None
            self._reset(puzzle, seed or str(int(self.clock() * 1000)))

        self.status = GameStatus.IN_PROGRESS
        log_message("GAME", f"🎮 New {mode.value} game #{self.puzzle_id}: {[g.category for g in self.puzzle]}")

    def _restore(self, outcome: DailyOutcome):
        self.found = list(outcome.found)
        self.guesses = [list(guess) for guess in outcome.guesses]
        self.revealed = {name for group in self.found for name in group.players}
        self.incorrect_count = sum(1 for guess in self.guesses if self._match(guess) is None)
        self.status = status_from_outcome(outcome.status)

        # Stored groups can diverge from the regenerated puzzle if the catalog changed
        if any(group not in self.puzzle for group in self.found):
            log_message("GAME", f"⚠️ Stored outcome for {outcome.day} no longer matches the generated puzzle")
        log_message("GAME", f"📖 Restored daily game {outcome.day}: {outcome.status}")

    def toggle(self, name: str):
        if self.status is not GameStatus.IN_PROGRESS:
            return
        if name in self.revealed or name not in self.deck:
            return
        if name in self.selected:
            self.selected.remove(name)
        elif len(self.selected) < GROUP_SIZE:
            self.selected.append(name)

    def submit(self):
        if self.status is not GameStatus.IN_PROGRESS or len(self.selected) != GROUP_SIZE:
            return

        guess = list(self.selected)
        self.guesses.append(guess)
        match = self._match(guess)

        if match:
            self.revealed.update(match.players)
            self.found.append(match)
            log_message("GAME", f"✅ Match found: {match.category}")
        else:
            self.incorrect_count += 1
            log_message("GAME", f"❌ No category match, {self.guesses_left} guesses left")

        # A hint preview only lasts until the next submit
        self.selected = []
        self.hint_revealed = set()

        if len(self.found) == GROUP_COUNT:
            self._finish(GameStatus.WON)
        elif self.incorrect_count >= self.max_incorrect:
            self._finish(GameStatus.LOST)

    def give_up(self):
        if self.status is not GameStatus.IN_PROGRESS:
            return
        self.revealed = {name for group in self.puzzle for name in group.players}
        self.found = list(self.puzzle)
        self.selected = []
        self.hint_revealed = set()
        self._finish(GameStatus.GAVE_UP)

    def use_hint(self):
        if self.status is not GameStatus.IN_PROGRESS or self.hints_used >= self.max_hints:
            return
        pending = [group for group in self.puzzle if group not in self.found]
        if not pending:
            return

        group = pending[0]
        reveal_count = 3 if self.last_hint_category == group.category else 2
        options = [name for name in group.players if name not in self.revealed]
        self.hint_revealed = set(shuffle(options, self.random_source)[:reveal_count])
        self.hints_used += 1
        self.last_hint_category = group.category
        log_message("GAME", f"💡 Hint {self.hints_used}/{self.max_hints}: {len(self.hint_revealed)} players highlighted")

    def _match(self, guess: List[str]) -> Optional[PuzzleGroup]:
        chosen = set(guess)
        for group in self.puzzle:
            if chosen == set(group.players):
                return group
        return None

    def _finish(self, status: GameStatus):
        self.status = status
        log_message("GAME", f"🏁 Game #{self.puzzle_id} finished: {status.value}")

        if status is GameStatus.WON and self.on_win:
            self.on_win(self)

        if self.mode is not GameMode.DAILY:
            return

        if status is GameStatus.WON:
            self.streaks.record_win(self.day)
        else:
            self.streaks.record_loss()

        outcome = DailyOutcome(
            day=self.day,
            status=OUTCOME_STATUS[status],
            found=list(self.found),
            guesses=[list(guess) for guess in self.guesses],
        )
        self.progress.save(self.day, outcome)

    def to_dict(self) -> Dict[str, Any]:
        view = {
            "mode": self.mode.value if self.mode else None,
            "status": self.status.value,
            "puzzle_id": self.puzzle_id,
            "day": self.day,
            "remaining": self.remaining(),
            "selected": list(self.selected),
            "hint_revealed": [name for name in self.deck if name in self.hint_revealed],
            "found": [group.to_dict() for group in self.found],
            "guess_count": len(self.guesses),
            "incorrect_count": self.incorrect_count,
            "guesses_left": self.guesses_left,
            "hints_used": self.hints_used,
            "max_hints": self.max_hints,
        }
        if self.is_terminal:
            view["solution"] = [group.to_dict() for group in self.puzzle]
        return view
