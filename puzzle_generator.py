from datetime import datetime
from typing import List, Optional

from catalog import GROUP_COUNT, GROUP_SIZE
from logs import log_message
from models import Category, PuzzleGroup
from shuffle import RandomSource, make_random_source, shuffle


class PuzzleGenerationError(Exception):
    """The catalog could not yield enough disjoint categories."""


def get_today_date_key() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d")


class PuzzleGenerator:
    def __init__(self, categories: List[Category], max_attempts: int = 1000):
        self.categories = categories
        self.max_attempts = max_attempts

    def generate(self, seed: Optional[str] = None) -> List[PuzzleGroup]:
        rng = make_random_source(seed)

        for attempt in range(1, self.max_attempts + 1):
            picks = self._pick_disjoint_categories(rng)
            if len(picks) == GROUP_COUNT:
                if attempt > 1:
                    log_message("GENERATOR", f"🔁 Found disjoint categories after {attempt} attempts")
                return [
                    PuzzleGroup(
                        category=cat.category,
                        players=shuffle(cat.players, rng)[:GROUP_SIZE],
                    )
                    for cat in picks
                ]

        raise PuzzleGenerationError(
            f"No {GROUP_COUNT} disjoint categories found in {self.max_attempts} attempts "
            f"(catalog has {len(self.categories)} categories)"
        )

    def _pick_disjoint_categories(self, rng: RandomSource) -> List[Category]:
        picks = []
        used = set()
        for cat in shuffle(self.categories, rng):
            if used.isdisjoint(cat.players):
                picks.append(cat)
                used.update(cat.players)
                if len(picks) == GROUP_COUNT:
                    break
        return picks
