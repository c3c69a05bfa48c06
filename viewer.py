import colorsys

import pygame

from geometry import COLS, ROWS

CELL_SIZE = 80
HERO_COLOR = (255, 0, 0)
BACKGROUND = (240, 240, 240)


# -------- Colours (red reserved for the hero) --------
def generate_colors(board):
    """One colour per piece: a hue per shape, lighter shades for repeats.

    Hues stay clear of red so the hero is never confused with a blocker.
    """
    shapes = sorted({(p.height, p.width) for p in board.pieces[1:]})
    seen = {}
    colors = [HERO_COLOR]
    for p in board.pieces[1:]:
        shape = (p.height, p.width)
        hue = 0.1 + 0.8 * shapes.index(shape) / max(len(shapes), 1)
        light = 0.45 + 0.1 * seen.get(shape, 0)
        seen[shape] = seen.get(shape, 0) + 1
        r, g, b = colorsys.hls_to_rgb(hue, min(light, 0.85), 0.7)
        colors.append((int(r*255), int(g*255), int(b*255)))
    return colors


def piece_rects(board, cell_size=CELL_SIZE):
    """Screen rectangle for every piece, in piece-index order."""
    return [pygame.Rect(p.anchor.col * cell_size, p.anchor.row * cell_size,
                        p.width * cell_size, p.height * cell_size)
            for p in board.pieces]


def draw_board(screen, board, colors, cell_size=CELL_SIZE):
    screen.fill(BACKGROUND)
    for idx, rect in enumerate(piece_rects(board, cell_size)):
        pygame.draw.rect(screen, colors[idx], rect)
        pygame.draw.rect(screen, (0, 0, 0), rect, 2)


# -------- Show one board --------
def visualize_state(board, cell_size=CELL_SIZE):
    """Open a window showing `board` until it is closed or ESC is pressed."""
    pygame.init()
    screen = pygame.display.set_mode((COLS * cell_size, ROWS * cell_size))
    pygame.display.set_caption("Klotski")
    clock = pygame.time.Clock()

    colors = generate_colors(board)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                running = False

        draw_board(screen, board, colors, cell_size)
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()
