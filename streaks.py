from database import KeyValueStore
from logs import log_message
from models import Stats

STATS_KEY = "stats"


class StreakTracker:
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.stats = self._load()

    def _load(self) -> Stats:
        data = self.store.get_json(STATS_KEY)
        if data is None:
            return Stats()
        try:
            return Stats.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            log_message("STREAKS", f"⚠️ Ignoring malformed stats: {e}")
            return Stats()

    def record_win(self, day: str) -> Stats:
        # A day already counted (e.g. on reload) never counts twice
        if self.stats.last_played_day == day:
            return self.stats

        current = self.stats.current_streak + 1
        self.stats = Stats(
            last_played_day=day,
            current_streak=current,
            best_streak=max(self.stats.best_streak, current),
        )
        self._persist()
        log_message("STREAKS", f"🔥 Win on {day}: streak {self.stats.current_streak}, best {self.stats.best_streak}")
        return self.stats

    def record_loss(self) -> Stats:
        self.stats = Stats(
            last_played_day=self.stats.last_played_day,
            current_streak=0,
            best_streak=self.stats.best_streak,
        )
        self._persist()
        log_message("STREAKS", "💔 Streak reset")
        return self.stats

    def _persist(self) -> bool:
        return self.store.set_json(STATS_KEY, self.stats.to_dict())
