"""
Pygame renderer for the game.

Draws the board, the falling piece, a next-piece preview and a sidebar
with score / high score / level. The renderer only reads GameState
snapshots; it never feeds anything back into the game.
"""

from __future__ import annotations

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from blockdrop.game.collision import piece_cells
from blockdrop.game.state import ActivePiece, GameState


# ── Color constants ───────────────────────────────────────────────────────
BACKGROUND_COLOR = (30, 30, 30)
GRID_LINE_COLOR = (60, 60, 60)
BORDER_COLOR = (200, 200, 200)
TEXT_COLOR = (255, 255, 255)
SIDEBAR_BG_COLOR = (20, 20, 20)
EMPTY_CELL_COLOR = (40, 40, 40)
FALLBACK_COLOR = (128, 128, 128)

# ── Color tag -> RGB ─────────────────────────────────────────────────────
PALETTE: dict[str, tuple[int, int, int]] = {
    "yellow": (255, 255, 0),
    "aqua": (0, 255, 255),
    "blue": (0, 0, 255),
    "orange": (255, 165, 0),
    "green": (0, 255, 0),
    "red": (255, 0, 0),
    "purple": (128, 0, 128),
}


def rgb(tag: str | None) -> tuple[int, int, int]:
    """Resolve a color tag to an RGB triple."""
    if tag is None:
        return EMPTY_CELL_COLOR
    return PALETTE.get(tag, FALLBACK_COLOR)


class GameRenderer:
    """Pygame window showing the board on the left and a sidebar on the right.

    Attributes:
        width: Board columns.
        height: Board rows.
        cell_size: Pixel size of each grid cell.
        board_pixel_width: Pixel width of the board area.
        board_pixel_height: Pixel height of the board area.
        sidebar_width: Pixel width of the sidebar.
        screen: Pygame display surface (created on first render).
    """

    SIDEBAR_WIDTH_CELLS: int = 7

    def __init__(self, width: int, height: int, cell_size: int = 20) -> None:
        """Set up window geometry without opening the window.

        Raises:
            ImportError: If pygame is not installed.
        """
        if pygame is None:
            raise ImportError("pygame is required for rendering. Install it: pip install pygame")

        self.width = width
        self.height = height
        self.cell_size = cell_size

        self.board_pixel_width = cell_size * width
        self.board_pixel_height = cell_size * height
        self.sidebar_width = cell_size * self.SIDEBAR_WIDTH_CELLS
        self.window_width = self.board_pixel_width + self.sidebar_width
        self.window_height = self.board_pixel_height

        self.screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._initialized: bool = False

    def init(self) -> None:
        """Initialize Pygame display, clock and fonts (idempotent)."""
        if self._initialized:
            return
        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("blockdrop")
        self._clock = pygame.time.Clock()
        self._font = pygame.font.SysFont("monospace", 20)
        self._small_font = pygame.font.SysFont("monospace", 14)
        self._initialized = True

    def render(self, state: GameState, fps: int = 60) -> None:
        """Draw ``state`` and flip the display."""
        self.init()
        self.screen.fill(BACKGROUND_COLOR)
        self._draw_board(state)
        self._draw_current_piece(state.current_piece)
        self._draw_sidebar(state)

        pygame.draw.rect(
            self.screen,
            BORDER_COLOR,
            (0, 0, self.board_pixel_width, self.board_pixel_height),
            2,
        )
        if state.ended:
            self._draw_game_over_overlay()

        pygame.display.flip()
        self._clock.tick(fps)

    def _draw_cell(self, x: int, y: int, color: tuple[int, int, int], size: int) -> None:
        pygame.draw.rect(self.screen, color, (x, y, size, size))
        darker = tuple(max(0, c - 40) for c in color)
        pygame.draw.rect(self.screen, darker, (x, y, size, size), 1)

    def _draw_board(self, state: GameState) -> None:
        for row, cells in enumerate(state.board.to_rows()):
            for col, tag in enumerate(cells):
                x = col * self.cell_size
                y = row * self.cell_size
                if tag is not None:
                    self._draw_cell(x, y, rgb(tag), self.cell_size)
                else:
                    pygame.draw.rect(
                        self.screen, EMPTY_CELL_COLOR, (x, y, self.cell_size, self.cell_size)
                    )
                pygame.draw.rect(
                    self.screen, GRID_LINE_COLOR, (x, y, self.cell_size, self.cell_size), 1
                )

    def _draw_current_piece(self, piece: ActivePiece) -> None:
        """Draw the falling piece; cells still above row 0 are not shown."""
        color = rgb(piece.color)
        for col, row in piece_cells(piece):
            if 0 <= row < self.height and 0 <= col < self.width:
                self._draw_cell(col * self.cell_size, row * self.cell_size, color, self.cell_size)

    def _draw_sidebar(self, state: GameState) -> None:
        sidebar_x = self.board_pixel_width
        pygame.draw.rect(
            self.screen,
            SIDEBAR_BG_COLOR,
            (sidebar_x, 0, self.sidebar_width, self.window_height),
        )
        pygame.draw.line(
            self.screen,
            BORDER_COLOR,
            (sidebar_x, 0),
            (sidebar_x, self.window_height),
            2,
        )

        text_x = sidebar_x + 15
        self._draw_piece_preview(state.next_piece, text_x, 20, "NEXT")

        text_y = 160
        for label, value in (
            ("SCORE", state.score),
            ("HIGH", state.highscore),
            ("LEVEL", state.level),
        ):
            self._draw_text(label, text_x, text_y)
            self._draw_text(str(value), text_x, text_y + 25)
            text_y += 65

    def _draw_piece_preview(self, piece: ActivePiece, x_offset: int, y_offset: int, label: str) -> None:
        """Draw ``piece`` in rotation state 0, centered in a small box."""
        preview_cell = self.cell_size * 2 // 3
        box_size = preview_cell * 5

        self._draw_text(label, x_offset, y_offset)
        box_y = y_offset + 25
        pygame.draw.rect(self.screen, EMPTY_CELL_COLOR, (x_offset, box_y, box_size, box_size))
        pygame.draw.rect(self.screen, BORDER_COLOR, (x_offset, box_y, box_size, box_size), 1)

        shape = piece.shape
        rows, cols = shape.shape
        offset_x = x_offset + (box_size - cols * preview_cell) // 2
        offset_y = box_y + (box_size - rows * preview_cell) // 2
        color = rgb(piece.color)
        for r in range(rows):
            for c in range(cols):
                if shape[r, c] != 0:
                    self._draw_cell(
                        offset_x + c * preview_cell,
                        offset_y + r * preview_cell,
                        color,
                        preview_cell,
                    )

    def _draw_game_over_overlay(self) -> None:
        """Dim the board and show the restart hint."""
        overlay = pygame.Surface(
            (self.board_pixel_width, self.board_pixel_height), pygame.SRCALPHA
        )
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))

        text_go = self._font.render("GAME OVER", True, (255, 50, 50))
        text_restart = self._small_font.render("Press R to restart", True, TEXT_COLOR)
        cx = self.board_pixel_width // 2
        cy = self.board_pixel_height // 2
        self.screen.blit(text_go, (cx - text_go.get_width() // 2, cy - 30))
        self.screen.blit(text_restart, (cx - text_restart.get_width() // 2, cy + 10))

    def _draw_text(self, text: str, x: int, y: int, color: tuple[int, int, int] = TEXT_COLOR) -> None:
        surface = self._font.render(text, True, color)
        self.screen.blit(surface, (x, y))

    def close(self) -> None:
        """Shut down Pygame and close the window."""
        if self._initialized:
            pygame.quit()
            self._initialized = False
