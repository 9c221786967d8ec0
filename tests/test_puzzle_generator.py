import pytest

from catalog import load_categories
from config import get_settings
from models import Category, PuzzleGroup
from puzzle_generator import PuzzleGenerationError, PuzzleGenerator, get_today_date_key

SEEDS = ["2024-01-01", "2024-02-29", "2025-12-25", "random-seed", "1700000000000"]


@pytest.fixture
def real_categories():
    return load_categories(get_settings().CATEGORIES_PATH)


def assert_valid_puzzle(puzzle, catalog):
    pools = {cat.category: set(cat.players) for cat in catalog}
    assert len(puzzle) == 4
    assert all(len(group.players) == 4 for group in puzzle)
    assert len({name for group in puzzle for name in group.players}) == 16
    assert len({group.category for group in puzzle}) == 4
    for group in puzzle:
        assert set(group.players) <= pools[group.category]


@pytest.mark.parametrize("seed", SEEDS)
def test_same_seed_gives_same_puzzle(categories, seed):
    generator = PuzzleGenerator(categories)
    assert generator.generate(seed) == generator.generate(seed)


@pytest.mark.parametrize("seed", SEEDS)
def test_same_seed_gives_same_puzzle_across_generators(real_categories, seed):
    assert PuzzleGenerator(real_categories).generate(seed) == PuzzleGenerator(real_categories).generate(seed)


def test_generated_puzzles_hold_sixteen_unique_names(real_categories):
    generator = PuzzleGenerator(real_categories)
    for day in range(1, 29):
        assert_valid_puzzle(generator.generate(f"2024-02-{day:02d}"), real_categories)


def test_picked_category_pools_are_disjoint(real_categories):
    pools = {cat.category: set(cat.players) for cat in real_categories}
    generator = PuzzleGenerator(real_categories)
    for n in range(50):
        picked = [pools[group.category] for group in generator.generate(f"seed-{n}")]
        assert sum(len(pool) for pool in picked) == len(set().union(*picked))


def test_unseeded_generation_is_valid(categories):
    generator = PuzzleGenerator(categories)
    for _ in range(20):
        assert_valid_puzzle(generator.generate(), categories)


def test_overlapping_catalog_raises_after_max_attempts():
    overlapping = [
        Category(category=f"Cat {i}", players=["shared", f"{i}a", f"{i}b", f"{i}c"])
        for i in range(6)
    ]
    generator = PuzzleGenerator(overlapping, max_attempts=5)
    with pytest.raises(PuzzleGenerationError):
        generator.generate("2024-01-01")


def test_today_key_is_iso_date():
    key = get_today_date_key()
    assert len(key) == 10
    assert key[4] == "-" and key[7] == "-"


def test_daily_puzzle_for_a_fixed_date_never_changes(real_categories):
    puzzle = PuzzleGenerator(real_categories).generate("2024-01-01")
    assert puzzle == [
        PuzzleGroup(
            category="Legendary goalkeepers",
            players=("Manuel Neuer", "Thibaut Courtois", "Iker Casillas", "Gianluigi Buffon"),
        ),
        PuzzleGroup(
            category="Premier League Golden Boot winners",
            players=("Robin van Persie", "Thierry Henry", "Luis Suárez", "Jamie Vardy"),
        ),
        PuzzleGroup(
            category="Ballon d'Or winners",
            players=("Karim Benzema", "Kaká", "Cristiano Ronaldo", "Pavel Nedvěd"),
        ),
        PuzzleGroup(
            category="Came through at Ajax",
            players=("Dennis Bergkamp", "Marco van Basten", "Clarence Seedorf", "Frank de Boer"),
        ),
    ]
