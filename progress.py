from typing import Optional

from database import KeyValueStore
from logs import log_message
from models import DailyOutcome


def progress_key(day: str) -> str:
    return f"dailyProgress:{day}"


class DailyProgressStore:
    """Terminal outcome of each day's daily puzzle, keyed by YYYY-MM-DD."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self, day: str) -> Optional[DailyOutcome]:
        data = self.store.get_json(progress_key(day))
        if data is None:
            return None
        try:
            return DailyOutcome.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            log_message("PROGRESS", f"⚠️ Ignoring malformed progress for {day}: {e}")
            return None

    def save(self, day: str, outcome: DailyOutcome) -> bool:
        saved = self.store.set_json(progress_key(day), outcome.to_dict())
        if saved:
            log_message("PROGRESS", f"💾 Saved {outcome.status} for {day}: {len(outcome.found)} groups, {len(outcome.guesses)} guesses")
        return saved
