from models import PuzzleGroup
from share import format_share_text

PUZZLE = [
    PuzzleGroup(category="Cat A", players=["A1", "A2", "A3", "A4"]),
    PuzzleGroup(category="Cat B", players=["B1", "B2", "B3", "B4"]),
    PuzzleGroup(category="Cat C", players=["C1", "C2", "C3", "C4"]),
    PuzzleGroup(category="Cat D", players=["D1", "D2", "D3", "D4"]),
]


def test_share_rows_follow_group_colours():
    text = format_share_text(
        PUZZLE,
        [["A1", "A2", "A3", "B1"], ["D4", "C1", "B2", "A4"]],
        "2024-01-01",
        link="https://example.com/",
    )
    assert text.split("\n") == [
        "Footly Puzzle #2024-01-01",
        "🟪🟪🟪🟩",
        "🟨🟦🟩🟪",
        "https://example.com/",
    ]


def test_unknown_names_are_marked_as_misses():
    text = format_share_text(PUZZLE, [["A1", "Z9", "A2", "A3"]], "42", title="Test")
    assert text == "Test #42\n🟪⬛🟪🟪"
