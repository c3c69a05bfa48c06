from board_state_class import SOLUTION


# ----------------------------
# Heuristic
# ----------------------------
def manhattan_h(board):
    # target piece's Manhattan distance to the exit; one slide changes it by at most 1
    anchor = board.target_piece().anchor
    return abs(anchor.row - SOLUTION.row) + abs(anchor.col - SOLUTION.col)
