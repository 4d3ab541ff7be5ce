#!/usr/bin/env python3
"""
Grid Pathfinding Viewer — walls, two algorithms, animated replay

- Mouse:
    left click on grid   -> toggle wall (drag to paint)
    [DIJKSTRA] / [A*]    -> run that algorithm and replay its trace
- Keyboard:
    [D]/[A]      -> run Dijkstra / A*
    [SPACE]      -> pause/resume replay
    [N]          -> single replay step
    [S]          -> skip replay to the end
    [C]          -> clear all walls
    [+]/[-]      -> faster / slower replay
    [Q]/[ESC]    -> quit

Config: see gridpath.app.settings (env GRIDPATH_* or --size= --metric= --delay=).
"""

# --- bootstrap import path so `from gridpath...` works when run as a script ---
import sys
import logging
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------

from typing import Optional, Tuple
import pygame

from gridpath.app import theme_skin as THEME
from gridpath.app.settings import (
    BUTTON_PADDING, CELL_SIZE, FPS, MARGIN, PANEL_SPACING, PANEL_W,
    Settings, resolve_settings,
)
from gridpath.core.player import PlayerStatus
from gridpath.core.session import Session
from gridpath.core.types import Cell, Grid

logger = logging.getLogger(__name__)

FONT_NAME = None  # default pygame font
MAX_GRID_PX = 720

# Button fills
DIJKSTRA_FILL = (0, 255, 0)
ASTAR_FILL    = (255, 0, 255)
BTN_TEXT      = (255, 255, 255)


def cell_at(pos: Tuple[int, int], origin: Tuple[int, int], cell_size: int, size: int) -> Optional[Cell]:
    """Map a window pixel to a grid cell, or None outside the grid."""
    x, y = pos[0] - origin[0], pos[1] - origin[1]
    if x < 0 or y < 0:
        return None
    col, row = x // cell_size, y // cell_size
    if col >= size or row >= size:
        return None
    return (int(col), int(row))


def auto_cell_size(size: int) -> int:
    return max(4, min(CELL_SIZE, MAX_GRID_PX // size))


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, fill):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.fill = fill
        self.hover = False
        self.active = False  # highlight while its animation is live

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        fill = tuple(min(255, c + 30) for c in self.fill) if self.hover else self.fill
        pygame.draw.rect(screen, fill, self.rect, border_radius=6)
        if self.active:
            pygame.draw.rect(screen, (120, 170, 255), self.rect, width=2, border_radius=6)
        text = font.render(self.label, True, BTN_TEXT)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, session: Session):
        pygame.init()

        self.session = session
        self.grid: Grid = session.grid
        self.cell_size = auto_cell_size(self.grid.size)
        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 24)

        grid_px = self.grid.size * self.cell_size
        win_w = grid_px + 2 * MARGIN + PANEL_W
        win_h = max(grid_px + 2 * MARGIN, 420)
        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption("Grid Pathfinding Visualizer")

        self._grid_origin = (MARGIN, MARGIN)
        self._right_band = pygame.Rect(grid_px + 2 * MARGIN, 0, PANEL_W, win_h)
        self._buttons: list[UIButton] = []
        self._build_buttons()

        self._paint_value: Optional[bool] = None  # wall state while dragging
        self.clock = pygame.time.Clock()

    def _build_buttons(self):
        rb = self._right_band
        x = rb.x + MARGIN
        y = rb.y + MARGIN
        w = rb.width - 2 * MARGIN
        h = self.font.get_height() + BUTTON_PADDING

        self.btn_dijkstra = UIButton("DIJKSTRA", pygame.Rect(x, y, w, h),
                                     lambda: self._run("Dijkstra"), DIJKSTRA_FILL)
        y += h + PANEL_SPACING
        self.btn_astar = UIButton("A*", pygame.Rect(x, y, w, h),
                                  lambda: self._run("A*"), ASTAR_FILL)
        self._buttons = [self.btn_dijkstra, self.btn_astar]
        self._panel_text_y = y + h + 2 * PANEL_SPACING

    # ---------- loop ----------
    def run(self):
        while True:
            self._handle_events()
            self.session.tick(pygame.time.get_ticks())
            self._draw()
            self.clock.tick(FPS)

    def _run(self, algo: str):
        self.session.run(algo, pygame.time.get_ticks())
        self.btn_dijkstra.active = algo == "Dijkstra"
        self.btn_astar.active = algo == "A*"

    def _after_edit(self):
        for b in self._buttons:
            b.active = False

    def _quit(self):
        pygame.quit(); sys.exit(0)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                c = cell_at(e.pos, self._grid_origin, self.cell_size, self.grid.size)
                if c is not None:
                    changed = self.session.toggle_wall(c)
                    self._paint_value = self.grid.is_wall(c) if changed else None
                    self._after_edit()
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self._paint_value = None
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                if self._paint_value is not None and e.buttons[0]:
                    c = cell_at(e.pos, self._grid_origin, self.cell_size, self.grid.size)
                    if c is not None and self.session.set_wall(c, self._paint_value):
                        self._after_edit()

    def _handle_key(self, key):
        s = self.session
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._quit()
        elif key == pygame.K_d:
            self._run("Dijkstra")
        elif key == pygame.K_a:
            self._run("A*")
        elif key == pygame.K_SPACE:
            s.paused = not s.paused
        elif key == pygame.K_n:
            s.step_once()
        elif key == pygame.K_s:
            s.skip_to_end()
        elif key == pygame.K_c:
            s.clear_walls()
            self._after_edit()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            s.set_delay(s.delay_ms // 2)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            s.set_delay(s.delay_ms * 2)

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        for (col, row) in self.grid.cells():
            rect = pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)
            pygame.draw.rect(self.screen, self.session.color_of((col, row)), rect)
            pygame.draw.rect(self.screen, THEME.GRID_LINE, rect, 1)

    def _draw_panel(self):
        rb = self._right_band
        THEME.glass_panel(self.screen, rb.inflate(-MARGIN, -MARGIN))
        for b in self._buttons:
            b.draw(self.screen, self.font)

        x0 = rb.x + MARGIN + 4
        y0 = self._panel_text_y

        def line(text, big=False, color=THEME.TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font_small
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        s = self.session
        m = s.metrics
        line("Metrics", big=True, color=THEME.ACCENT_GOLD)
        line(f"Algo: {m['algo'] or '-'}")
        line(f"Settled: {m['settled']}")
        line(f"Frontier: {m['frontier']}")
        line(f"Path Len: {m['path_len']}")
        if m["total_cost"] is not None:
            line(f"Total Cost: {m['total_cost']:.3f}")
        line(f"Metric: {s.model.name}")
        line(f"Delay: {s.delay_ms} ms/step")

        status = s.status
        if status is not PlayerStatus.IDLE:
            p = s.live_player
            label = "Paused" if s.paused and status is PlayerStatus.RUNNING else status.value.title()
            line(f"{label} {p.cursor}/{len(p.trace)}")

        if s.message:
            THEME.draw_pill(self.screen, self.font_small, s.message,
                            (rb.x + MARGIN, rb.bottom - 50), rb.width - 2 * MARGIN)


# ---------- main ----------
def main(argv=None):
    try:
        settings: Settings = resolve_settings(argv)
    except ValueError as ex:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", ex)
        sys.exit(1)

    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("grid %dx%d, metric=%s, delay=%dms",
                settings.grid_size, settings.grid_size, settings.metric, settings.delay_ms)

    session = Session(Grid(settings.grid_size), settings.model, delay_ms=settings.delay_ms)
    Viewer(session).run()

if __name__ == "__main__":
    main()
