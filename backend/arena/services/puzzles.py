import random

DIFFICULTIES = ('easy', 'medium', 'hard')

# 81 cells, row-major, '.' marks a blank
_CATALOGUE = {
    'easy': [
        "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79",
        "..3.2.6..9..3.5..1..18.64....81.29..7.......8..67.82....26.95..8..2.3..9..5.1.3..",
    ],
    'medium': [
        "..9748...7.........2.1.9.....7...24..64.1.59..98...3.....8.3.2.........6...2759..",
        "...26.7.168..7..9.19...45..82.1...4...46.29...5...3.28..93...74.4..5..367.3.18...",
    ],
    'hard': [
        "4.....8.5.3..........7......2.....6.....8.4......1.......6.3.7.5..2.....1.4......",
        "52...6.........7.13...........4..8..6......5...........418.........3..2...87.....",
    ],
}


def generate_puzzle(difficulty='easy') -> str:
    """Return a puzzle string for the given difficulty.

    The relay never inspects the result; it is only handed back to the
    client that asked for it.
    """
    key = (difficulty or 'easy').lower()
    if key not in _CATALOGUE:
        raise ValueError(f"unknown difficulty: {difficulty}")
    return random.choice(_CATALOGUE[key])
