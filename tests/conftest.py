import pytest

from database import MemoryStore
from game_logic import GameSession
from models import Category
from progress import DailyProgressStore
from puzzle_generator import PuzzleGenerator
from streaks import StreakTracker

TODAY = "2024-01-01"


@pytest.fixture
def categories():
    return [
        Category(category=f"Cat {letter}", players=[f"{letter}{i}" for i in range(1, 6)])
        for letter in "ABCDEF"
    ]


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_session(categories, store):
    def factory(**kwargs):
        kwargs.setdefault("today", lambda: TODAY)
        return GameSession(
            PuzzleGenerator(categories),
            DailyProgressStore(store),
            StreakTracker(store),
            **kwargs,
        )
    return factory


@pytest.fixture
def daily_session(make_session):
    session = make_session()
    session.start("daily")
    return session


def select(session, names):
    for name in names:
        session.toggle(name)


def solve_group(session, group):
    select(session, group.players)
    session.submit()


def wrong_guess(session):
    first, second = [g for g in session.puzzle if g not in session.found][:2]
    select(session, first.players[:3] + second.players[:1])
    session.submit()
