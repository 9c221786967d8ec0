from typing import List

from models import PuzzleGroup

GROUP_COLORS = ["🟪", "🟩", "🟦", "🟨"]
MISS_COLOR = "⬛"


def color_for(puzzle: List[PuzzleGroup], name: str) -> str:
    for index, group in enumerate(puzzle):
        if name in group.players:
            return GROUP_COLORS[index % len(GROUP_COLORS)]
    return MISS_COLOR


def format_share_text(
    puzzle: List[PuzzleGroup],
    guesses: List[List[str]],
    puzzle_id: str,
    title: str = "Footly Puzzle",
    link: str = "",
) -> str:
    """One row of coloured squares per guess, keyed by the group each name belongs to."""
    rows = ["".join(color_for(puzzle, name) for name in guess) for guess in guesses]
    lines = [f"{title} #{puzzle_id}", *rows]
    if link:
        lines.append(link)
    return "\n".join(lines)
