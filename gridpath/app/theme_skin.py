"""
Panel skin — visuals only; no logic
- Backdrop: dark vertical gradient, cached per window size
- Right panel: frosted glass underlay (viewer draws buttons/metrics on top)
- Message pill: rounded label for "No Path Found!" and similar

The viewer stays the source of truth for state; this module only paints.
"""

from __future__ import annotations
from typing import Tuple
import pygame

# ---- palette ----
TEXT_LIGHT    = (230, 235, 240)
ACCENT_GOLD   = (255, 210, 0)
FAIL_RED      = (220, 50, 47)
GRID_LINE     = (255, 0, 0)       # cell outlines

GRADIENT_TOP  = (24, 26, 32)
GRADIENT_BOT  = (36, 40, 48)

PANEL_FILL    = (18, 20, 28, 190)
PANEL_SHADOW  = (0, 0, 0, 140)
PANEL_RIM     = (255, 255, 255, 24)
PILL_BG       = (24, 28, 36, 220)

# caches
_backdrop_by_size: dict[Tuple[int, int], pygame.Surface] = {}

# ---------- helpers ----------
def _lerp(a, b, t: float):
    return tuple(int(x + (y - x) * t) for x, y in zip(a, b))

def glass_panel(screen: pygame.Surface, rect: pygame.Rect, radius: int = 14):
    """Translucent card with a drop shadow offset down-right and a faint rim."""
    if rect.width <= 0 or rect.height <= 0:
        return
    layer = pygame.Surface((rect.width + 6, rect.height + 6), pygame.SRCALPHA)
    body = pygame.Rect(0, 0, rect.width, rect.height)
    pygame.draw.rect(layer, PANEL_SHADOW, body.move(6, 6), border_radius=radius)
    pygame.draw.rect(layer, PANEL_FILL, body, border_radius=radius)
    pygame.draw.rect(layer, PANEL_RIM, body, width=1, border_radius=radius)
    screen.blit(layer, rect.topleft)

def draw_backdrop(screen: pygame.Surface):
    """Gradient backdrop, rendered once per window size."""
    size = screen.get_size()
    surf = _backdrop_by_size.get(size)
    if surf is None:
        w, h = size
        surf = pygame.Surface(size)
        for y in range(h):
            pygame.draw.line(surf, _lerp(GRADIENT_TOP, GRADIENT_BOT, y / max(1, h - 1)), (0, y), (w, y))
        _backdrop_by_size[size] = surf
    screen.blit(surf, (0, 0))

def draw_pill(screen: pygame.Surface, font: pygame.font.Font, text: str,
              topleft: Tuple[int, int], max_w: int, color=FAIL_RED):
    """Rounded message label (no outline)."""
    surf = font.render(text, True, color)
    pad_x, pad_y = 12, 6
    w = min(max_w, surf.get_width() + pad_x*2)
    h = surf.get_height() + pad_y*2
    pill = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(pill, PILL_BG, pill.get_rect(), border_radius=12)
    screen.blit(pill, topleft)
    screen.blit(surf, (topleft[0] + pad_x, topleft[1] + pad_y))
