import json
import random
from typing import Dict, List, Optional

from models import Category
from shuffle import RandomSource

GROUP_COUNT = 4
GROUP_SIZE = 4


class CatalogError(Exception):
    pass


def load_categories(path: str) -> List[Category]:
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    categories = [
        Category(category=entry["category"], players=tuple(entry["players"]))
        for entry in raw
    ]
    validate_catalog(categories)
    return categories


def validate_catalog(categories: List[Category]) -> None:
    """Reject catalogs the generator could never draw a full puzzle from."""
    labels = set()
    for cat in categories:
        if cat.category in labels:
            raise CatalogError(f"Duplicate category label: {cat.category}")
        labels.add(cat.category)
        if len(set(cat.players)) != len(cat.players):
            raise CatalogError(f"Duplicate players in category: {cat.category}")
        if len(cat.players) < GROUP_SIZE:
            raise CatalogError(
                f"Category {cat.category} has {len(cat.players)} players, needs {GROUP_SIZE}"
            )

    pools = [frozenset(cat.players) for cat in categories]
    if not has_disjoint_pools(pools, GROUP_COUNT):
        raise CatalogError(f"Catalog has no {GROUP_COUNT} mutually disjoint categories")


def has_disjoint_pools(pools: List[frozenset], count: int, start: int = 0, used: frozenset = frozenset()) -> bool:
    """Backtracking search that drops any branch as soon as a pool overlaps."""
    if count == 0:
        return True
    for index in range(start, len(pools) - count + 1):
        pool = pools[index]
        if used.isdisjoint(pool) and has_disjoint_pools(pools, count - 1, index + 1, used | pool):
            return True
    return False


def load_fun_facts(path: str) -> Dict[str, List[str]]:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def pick_fun_fact(
    facts: Dict[str, List[str]],
    category: str,
    random_source: RandomSource = random.random,
) -> Optional[str]:
    options = facts.get(category) or []
    if not options:
        return None
    return options[int(random_source() * len(options))]
