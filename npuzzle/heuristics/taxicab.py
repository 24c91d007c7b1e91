from npuzzle.domains.board import Board


def taxicab_distance(board: Board) -> int:
    """Manhattan distance; one move shifts exactly one tile by one cell."""
    return board.taxicab_distance()
