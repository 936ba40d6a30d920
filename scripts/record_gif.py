"""
Record a demo GIF of a seeded headless game.

Renders each state to an image using PIL (no pygame needed), then saves
the frames as an animated GIF.
Usage: python scripts/record_gif.py [--seed N] [--steps N] [--output PATH]
"""

import argparse
import pathlib
import sys

# Ensure project root is on path
PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from PIL import Image, ImageDraw, ImageFont

from blockdrop.game.collision import piece_cells
from blockdrop.renderer import PALETTE
from blockdrop.simulate import iter_game

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
OUTPUT_PATH = PROJECT_ROOT / "assets" / "demo.gif"
FRAME_DURATION_MS = 60

# Visual settings
CELL_SIZE = 20
SIDEBAR_WIDTH = 140
PREVIEW_CELL = 14

# Colors (RGB)
BG_COLOR = (18, 18, 24)
GRID_COLOR = (40, 40, 50)
GRID_LINE_COLOR = (30, 30, 40)
SIDEBAR_BG = (14, 14, 20)
BORDER_COLOR = (80, 80, 100)
LABEL_COLOR = (140, 140, 160)
ACCENT_COLOR = (100, 200, 255)
FALLBACK_COLOR = (128, 128, 128)


def darken(color, amount=50):
    return tuple(max(0, c - amount) for c in color)


def lighten(color, amount=40):
    return tuple(min(255, c + amount) for c in color)


def try_load_font(size):
    """Try to load a monospace font, fall back to default."""
    font_paths = [
        "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
        "/usr/share/fonts/truetype/freefont/FreeMono.ttf",
    ]
    for fp in font_paths:
        try:
            return ImageFont.truetype(fp, size)
        except (OSError, IOError):
            continue
    return ImageFont.load_default()


FONT_SMALL = try_load_font(12)
FONT_LARGE = try_load_font(18)


def draw_cell(draw, x, y, color, size=CELL_SIZE):
    """Draw a single filled cell with a highlight and a shadow edge."""
    draw.rectangle([x, y, x + size - 1, y + size - 1], fill=color)
    draw.line([(x, y), (x + size - 2, y)], fill=lighten(color, 60), width=1)
    draw.line([(x, y), (x, y + size - 2)], fill=lighten(color, 60), width=1)
    draw.line([(x + 1, y + size - 1), (x + size - 1, y + size - 1)], fill=darken(color, 60), width=1)
    draw.line([(x + size - 1, y + 1), (x + size - 1, y + size - 1)], fill=darken(color, 60), width=1)


def draw_piece_preview(draw, piece, x_start, y_start):
    """Draw ``piece`` centered in a 4x4 preview area."""
    shape = piece.shape
    rows, cols = shape.shape
    color = PALETTE.get(piece.color, FALLBACK_COLOR)
    for r in range(rows):
        for c in range(cols):
            if shape[r, c] != 0:
                draw_cell(draw, x_start + c * PREVIEW_CELL, y_start + r * PREVIEW_CELL,
                          color, size=PREVIEW_CELL)


def render_frame(state):
    """Render a single state as a PIL Image."""
    board = state.board
    board_px_w = board.width * CELL_SIZE
    board_px_h = board.height * CELL_SIZE
    img = Image.new("RGB", (board_px_w + SIDEBAR_WIDTH, board_px_h), BG_COLOR)
    draw = ImageDraw.Draw(img)

    # --- Board ---
    for row, cells in enumerate(board.to_rows()):
        for col, tag in enumerate(cells):
            x = col * CELL_SIZE
            y = row * CELL_SIZE
            if tag is not None:
                draw_cell(draw, x, y, PALETTE.get(tag, FALLBACK_COLOR))
            else:
                draw.rectangle([x, y, x + CELL_SIZE - 1, y + CELL_SIZE - 1],
                               fill=GRID_COLOR, outline=GRID_LINE_COLOR)

    # --- Falling piece (only the part inside the playfield) ---
    if not state.ended:
        color = PALETTE.get(state.current_piece.color, FALLBACK_COLOR)
        for col, row in piece_cells(state.current_piece):
            if board.is_inside(col, row):
                draw_cell(draw, col * CELL_SIZE, row * CELL_SIZE, color)

    draw.rectangle([0, 0, board_px_w - 1, board_px_h - 1], outline=BORDER_COLOR, width=2)

    # --- Sidebar ---
    sx = board_px_w
    draw.rectangle([sx, 0, sx + SIDEBAR_WIDTH - 1, board_px_h - 1], fill=SIDEBAR_BG)
    cx = sx + 12
    cy = 12
    draw.text((cx, cy), "NEXT", fill=LABEL_COLOR, font=FONT_SMALL)
    cy += 20
    draw_piece_preview(draw, state.next_piece, cx + 4, cy + 4)
    cy += 4 * PREVIEW_CELL + 24

    for label, value in (
        ("SCORE", state.score),
        ("HIGH", state.highscore),
        ("LEVEL", state.level),
    ):
        draw.text((cx, cy), label, fill=LABEL_COLOR, font=FONT_SMALL)
        cy += 15
        draw.text((cx, cy), str(value), fill=ACCENT_COLOR, font=FONT_LARGE)
        cy += 28

    if state.ended:
        draw.text((board_px_w // 2 - 40, board_px_h // 2 - 10), "GAME OVER",
                  fill=(255, 50, 50), font=FONT_LARGE)
    return img


def parse_args():
    parser = argparse.ArgumentParser(description="Record a demo GIF of a seeded game.")
    parser.add_argument("--seed", type=int, default=7, help="Game seed.")
    parser.add_argument("--steps", type=int, default=1500, help="Maximum number of actions.")
    parser.add_argument("--output", type=str, default=str(OUTPUT_PATH), help="GIF output path.")
    return parser.parse_args()


def main():
    args = parse_args()
    output_path = pathlib.Path(args.output)
    print("Recording demo GIF...")
    print(f"  Seed: {args.seed}")
    print(f"  Steps: {args.steps}")
    print(f"  Output: {output_path}")

    frames = [render_frame(state) for state in iter_game(args.seed, args.steps)]

    # Hold the last frame for a second
    frames.extend(frames[-1].copy() for _ in range(1000 // FRAME_DURATION_MS))
    print(f"Recording complete: {len(frames)} frames")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    quantized = [f.quantize(colors=64, method=Image.Quantize.MEDIANCUT) for f in frames]
    quantized[0].save(
        str(output_path),
        save_all=True,
        append_images=quantized[1:],
        duration=FRAME_DURATION_MS,
        loop=0,
        optimize=True,
    )
    file_size_mb = output_path.stat().st_size / (1024 * 1024)
    print(f"GIF saved: {output_path} ({file_size_mb:.1f} MB)")


if __name__ == "__main__":
    main()
