# klotski.py: A* solver for the classic 5x4 board
import argparse
import heapq
import sys
import time

from board_state_class import Board
from classic_start import classic_start
from geometry import COLS, ROWS
from heuristics import manhattan_h


# ----------------------------
# ASCII rendering
# ----------------------------
def render_ascii(board, labels=None):
    if labels is None:
        labels = [chr(ord('A') + i) for i in range(len(board.pieces))]
    grid = board.to_grid()
    return "\n".join("".join('.' if n is None else labels[n] for n in row)
                     for row in grid)


# ----------------------------
# A* search
# ----------------------------
def astar(start, neighbors, h, is_goal, progress_every=None):
    """Best-first search from `start`.

    `neighbors(s)` yields (next_state, cost) pairs and `h(s)` must be
    consistent. States are deduplicated by their own __eq__/__hash__.
    Returns a dict with `path` and `cost` set to None when the frontier
    runs dry.
    """
    t0 = time.time()
    open_heap = []  # (f, g, id, state)
    g_cost = {start: 0}
    parent = {start: None}
    closed = set()

    counter = 0
    heapq.heappush(open_heap, (h(start), 0, counter, start))

    expanded = 0
    generated = 0
    goal_state = None

    while open_heap:
        f, g, _, s = heapq.heappop(open_heap)
        if s in closed or g > g_cost[s]:
            continue

        if is_goal(s):
            goal_state = s
            break

        closed.add(s)
        expanded += 1
        if progress_every and expanded % progress_every == 0:
            print(f"[A*] expanded={expanded} open={len(open_heap)} f={f}")

        for nb, step in neighbors(s):
            generated += 1
            if nb in closed:
                continue
            ng = g + step
            if nb not in g_cost or ng < g_cost[nb]:
                g_cost[nb] = ng
                parent[nb] = s
                counter += 1
                heapq.heappush(open_heap, (ng + h(nb), ng, counter, nb))

    # reconstruct path if any
    path, cost = None, None
    if goal_state is not None:
        path = []
        cur = goal_state
        while cur is not None:
            path.append(cur)
            cur = parent[cur]
        path.reverse()
        cost = g_cost[goal_state]

    return {
        "path": path,
        "cost": cost,
        "expanded": expanded,
        "generated": generated,
        "time": time.time() - t0,
    }


def solve_klotski(board, progress_every=None):
    """Shortest slide sequence for `board` as (path, moves), or None."""
    result = astar(board, Board.successors, manhattan_h, Board.is_solution,
                   progress_every=progress_every)
    if result["path"] is None:
        return None
    return result["path"], result["cost"]


# ----------------------------
# Entry point
# ----------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description=f"Solve the classic {ROWS}x{COLS} Klotski puzzle with A*")
    parser.add_argument('--print-path', action='store_true', help='Print every board on the solution path')
    parser.add_argument('--progress', type=int, default=None, metavar='N',
                        help='Report search progress every N expanded states')
    parser.add_argument('--show', action='store_true', help='Open a pygame window with the solved board')
    args = parser.parse_args(argv)

    start = classic_start()
    print("Initial board:")
    print(start)

    solved = solve_klotski(start, progress_every=args.progress)
    if solved is None:
        print("No solution?")
        return 1

    path, steps = solved
    print("Solution found!")
    print(f"Steps: {steps}")
    if args.print_path:
        for i, board in enumerate(path):
            print(f"\n--- step {i} ---")
            print(render_ascii(board))
    print(f"Solution:\n{path[-1]}")

    if args.show:
        from viewer import visualize_state
        visualize_state(path[-1])
    return 0


if __name__ == "__main__":
    sys.exit(main())
