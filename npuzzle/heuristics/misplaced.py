from npuzzle.domains.board import Board


def num_incorrect(board: Board) -> int:
    """Misplaced-tile count. Each misplaced tile needs at least one move."""
    return board.num_incorrect()
