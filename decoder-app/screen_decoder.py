"""
Resistor Decoder - Color Band Decoder Screen

Pick a band count, then pick one color per band; the decoded resistance,
tolerance, temperature coefficient and tolerance range are shown live.

Layout (480 × 320):

  HEADER   (y   4– 30)  Title + band-count tabs (3 / 4 / 5 / 6)
  RESULT   (y  36–110)  Result card (left) + resistor illustration (right)
  BANDS    (y 118–316)  One row per band: role label + 12 color swatches

Swatches that are not legal for a band's role are drawn dimmed and ignore
taps.  Keyboard: 3–6 set the band count, Up/Down move the active band,
Left/Right cycle through that band's legal colors.

Construction modes (mirrors the UIManager test / hardware split):
  ScreenDecoder(surface)     test mode: plain Surface or MagicMock
  ScreenDecoder(ui_manager)  app mode: UIManager instance passed as 'surface'
"""

from __future__ import annotations

import logging

import pygame

import config
from band_layout import BAND_COUNTS, default_selection, layout_for
from color_code import decode, valid_colors_for
from resistor_constants import COLOR_NAMES, lookup
from value_format import (
    format_range,
    format_temp_coeff,
    format_tolerance,
    format_value,
)

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

_MARGIN = 8

# Header: band-count tabs, right-aligned
_TAB_Y   = 4
_TAB_H   = 26
_TAB_W   = 52
_TAB_GAP = 4
_TAB_X0  = config.SCREEN_W - _MARGIN - len(BAND_COUNTS) * (_TAB_W + _TAB_GAP) + _TAB_GAP

# Result card
_CARD_X = _MARGIN
_CARD_Y = 36
_CARD_W = 280
_CARD_H = 74

# Resistor illustration
_RES_X      = 296
_RES_W      = config.SCREEN_W - _MARGIN - _RES_X
_RES_Y      = 50
_RES_H      = 40
_LEAD_PCT   = 0.12
_BODY_PCT   = 0.76
_RES_BAND_W = 8

# Band rows
_ROWS_Y      = 118
_ROW_PITCH   = 33
_LABEL_W     = 84
_SWATCH_X0   = _MARGIN + _LABEL_W
_SWATCH_W    = 28
_SWATCH_H    = 26
_SWATCH_GAP  = 4

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------

BG_COLOR      = (15,  23,  42)
CARD_BG       = (22,  33,  62)
TEXT_COLOR    = (226, 232, 240)
TEXT_MUTED    = (150, 160, 180)
ACCENT        = (56,  189, 248)  # cyan: value, active tab / band
AMBER         = (251, 191, 36)   # tolerance details
RESISTOR_TAN  = (210, 180, 140)
LEAD_COLOR    = (160, 160, 160)
TAB_BG        = (30,  45,  75)

_DISABLED_ALPHA = 0.25   # blend factor toward BG_COLOR for illegal swatches

# Keyboard shortcuts for the band-count tabs
_BAND_COUNT_KEYS = {str(n): n for n in BAND_COUNTS}


# ---------------------------------------------------------------------------
# Font helpers  (module-level cache, safe to call multiple times)
# ---------------------------------------------------------------------------

_FONT_CACHE: dict[str, pygame.font.Font] | None = None


def _load_font(family: str, size: int, bold: bool = False) -> pygame.font.Font:
    """Load a font by family name with a fallback to the default font."""
    try:
        font = pygame.font.SysFont(family, size, bold=bold)
        if font is None:
            raise RuntimeError("SysFont returned None")
        return font
    except Exception:
        return pygame.font.SysFont(None, size, bold=bold)


def _fonts() -> dict[str, pygame.font.Font]:
    """Return cached font dict, initialising on first call."""
    global _FONT_CACHE
    if _FONT_CACHE is None:
        pygame.font.init()
        _FONT_CACHE = {
            "value":   _load_font("dejavusansmono", 30, bold=True),
            "heading": _load_font("dejavusans", 18, bold=True),
            "body":    _load_font("dejavusans", 14),
            "small":   _load_font("dejavusans", 12),
        }
    return _FONT_CACHE


# ---------------------------------------------------------------------------
# Pure-surface drawing helpers
# ---------------------------------------------------------------------------

def _draw_text(
    surface: pygame.Surface,
    text: str,
    font: pygame.font.Font,
    color: tuple,
    x: int,
    y: int,
    anchor: str = "topleft",
) -> pygame.Rect:
    """Render *text* onto *surface* at the given anchor position."""
    surf = font.render(text, True, color)
    rect = surf.get_rect()
    setattr(rect, anchor, (x, y))
    surface.blit(surf, rect)
    return rect


def _blend(rgb: tuple, alpha: float) -> tuple:
    """Mix *rgb* toward BG_COLOR; *alpha* = 1.0 keeps the original color."""
    return tuple(int(bg + (c - bg) * alpha) for c, bg in zip(rgb, BG_COLOR))


def _tab_rect(index: int) -> pygame.Rect:
    return pygame.Rect(_TAB_X0 + index * (_TAB_W + _TAB_GAP), _TAB_Y, _TAB_W, _TAB_H)


def _swatch_rect(band_index: int, color_index: int) -> pygame.Rect:
    x = _SWATCH_X0 + color_index * (_SWATCH_W + _SWATCH_GAP)
    y = _ROWS_Y + band_index * _ROW_PITCH
    return pygame.Rect(x, y, _SWATCH_W, _SWATCH_H)


# ---------------------------------------------------------------------------
# ScreenDecoder
# ---------------------------------------------------------------------------

class ScreenDecoder:
    """Interactive IEC 60062 color-band decoder.

    Holds the current band count and color selection; every draw decodes the
    selection afresh.

    Args:
        surface:    pygame.Surface to render onto, OR a UIManager instance
                    (detected via ``hasattr(surface, '_surface')``).
        band_count: Initial band count (defaults to config.DEFAULT_BAND_COUNT).
    """

    def __init__(self, surface, band_count: int = config.DEFAULT_BAND_COUNT) -> None:
        if hasattr(surface, "_surface"):
            self._ui      = surface
            self._surface = surface._surface
        else:
            self._ui      = None
            self._surface = surface

        self.band_count: int = band_count
        self.layout: tuple = ()
        self.selection: list[str] = []
        self.valid_colors: list[list[str]] = []
        self.active_band: int = 0

        # Hit-rects: tabs as (band_count, rect); swatches as (band, name, rect)
        self._tab_rects: list[tuple[int, pygame.Rect]] = []
        self._swatch_rects: list[tuple[int, str, pygame.Rect]] = []

        self.set_band_count(band_count)

        if not pygame.font.get_init():
            pygame.font.init()

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------

    def set_band_count(self, band_count: int) -> None:
        """Switch layouts and reset the selection to that layout's default.

        Raises:
            ValueError: If *band_count* is not 3, 4, 5 or 6.
        """
        self.layout       = layout_for(band_count)
        self.band_count   = band_count
        self.selection    = default_selection(band_count)
        self.valid_colors = [valid_colors_for(role) for role in self.layout]
        self.active_band  = 0
        self._build_hit_rects()
        log.debug("Band count set to %d: %s", band_count, self.selection)

    def select_color(self, band_index: int, name: str) -> None:
        """Set band *band_index* to color *name*.

        Raises:
            IndexError: If *band_index* is outside the current layout.
            KeyError:   If *name* is not a registry color.
            ValueError: If the color is not legal for that band's role.
        """
        role = self.layout[band_index]
        color = lookup(name)
        if color.name not in self.valid_colors[band_index]:
            raise ValueError(f"{name!r} is not a valid choice for {role.label}")
        self.selection[band_index] = color.name
        log.debug("Band %d (%s) → %s", band_index + 1, role.label, color.name)

    def cycle_color(self, step: int) -> None:
        """Move the active band *step* places through its legal colors."""
        choices = self.valid_colors[self.active_band]
        current = self.selection[self.active_band]
        index = choices.index(current) if current in choices else 0
        self.select_color(self.active_band, choices[(index + step) % len(choices)])

    def move_active_band(self, step: int) -> None:
        self.active_band = (self.active_band + step) % len(self.layout)

    @property
    def result(self):
        """Decoded result of the current selection."""
        return decode(self.layout, self.selection)

    # ------------------------------------------------------------------
    # Screen interface: update / draw / event handling
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        """No-op: this screen has no time-based animation."""
        pass

    def draw(self, surface: pygame.Surface | None = None) -> None:
        """Render the full decoder UI.

        Args:
            surface: Explicit target surface.  Defaults to self._surface.
        """
        target = surface if surface is not None else self._surface

        # Always fill first; works on both real surfaces and MagicMocks.
        target.fill(BG_COLOR)

        try:
            fnt = _fonts()
            self._draw_header(target, fnt)
            self._draw_result_card(target, fnt)
            self._draw_resistor(target)
            self._draw_band_rows(target, fnt)
        except (TypeError, pygame.error) as exc:
            # pygame.draw.* rejects MagicMock surfaces in tests.
            log.debug("Draw incomplete: %s", exc)

    def handle_event(self, event) -> None:
        """Process keyboard input.

        Handles:
        - K_UP / K_DOWN:    move the active band (wraps).
        - K_LEFT / K_RIGHT: cycle the active band through its legal colors.
        - ``"3"``–``"6"``:  switch band count.
        - Everything else:  ignored.
        """
        if event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_UP:
            self.move_active_band(-1)
        elif event.key == pygame.K_DOWN:
            self.move_active_band(1)
        elif event.key == pygame.K_LEFT:
            self.cycle_color(-1)
        elif event.key == pygame.K_RIGHT:
            self.cycle_color(1)
        elif event.unicode in _BAND_COUNT_KEYS:
            self.set_band_count(_BAND_COUNT_KEYS[event.unicode])

    def handle_touch(self, x: int, y: int) -> None:
        """Process an on-screen tap at pixel coordinates (*x*, *y*).

        Tabs switch band count; enabled swatches select a color and make that
        band active.  Taps on disabled swatches are ignored.
        """
        for band_count, rect in self._tab_rects:
            if rect.collidepoint(x, y):
                if band_count != self.band_count:
                    self.set_band_count(band_count)
                return

        for band_index, name, rect in self._swatch_rects:
            if rect.collidepoint(x, y):
                if name in self.valid_colors[band_index]:
                    self.active_band = band_index
                    self.select_color(band_index, name)
                return

    # ------------------------------------------------------------------
    # Private: hit-rects (independent of the target surface)
    # ------------------------------------------------------------------

    def _build_hit_rects(self) -> None:
        self._tab_rects = [(n, _tab_rect(i)) for i, n in enumerate(BAND_COUNTS)]
        self._swatch_rects = [
            (band_index, name, _swatch_rect(band_index, color_index))
            for band_index in range(len(self.layout))
            for color_index, name in enumerate(COLOR_NAMES)
        ]

    # ------------------------------------------------------------------
    # Private: drawing
    # ------------------------------------------------------------------

    def _draw_header(self, surface: pygame.Surface, fnt: dict) -> None:
        _draw_text(surface, "Resistor Decoder", fnt["heading"], TEXT_COLOR,
                   _MARGIN, _TAB_Y + _TAB_H // 2, anchor="midleft")

        for band_count, rect in self._tab_rects:
            active = band_count == self.band_count
            pygame.draw.rect(surface, ACCENT if active else TAB_BG, rect,
                             border_radius=6)
            _draw_text(surface, f"{band_count} Band", fnt["small"],
                       BG_COLOR if active else TEXT_COLOR,
                       rect.centerx, rect.centery, anchor="center")

    def _draw_result_card(self, surface: pygame.Surface, fnt: dict) -> None:
        card = pygame.Rect(_CARD_X, _CARD_Y, _CARD_W, _CARD_H)
        pygame.draw.rect(surface, CARD_BG, card, border_radius=8)
        pygame.draw.line(surface, ACCENT,
                         (card.left + 4, card.top + 1),
                         (card.right - 5, card.top + 1), 2)

        result = self.result
        value, unit = format_value(result.resistance)
        value_rect = _draw_text(surface, value, fnt["value"], ACCENT,
                                card.left + 10, card.top + 6)
        _draw_text(surface, unit, fnt["heading"], TEXT_MUTED,
                   value_rect.right + 4, value_rect.bottom - 4,
                   anchor="bottomleft")

        details = [format_tolerance(result.tolerance)]
        if result.temp_coeff is not None:
            details.append(format_temp_coeff(result.temp_coeff))
        _draw_text(surface, "   ".join(details), fnt["body"], AMBER,
                   card.left + 10, card.top + 42)
        _draw_text(surface, format_range(result.resistance, result.tolerance),
                   fnt["small"], TEXT_MUTED, card.left + 10, card.top + 58)

    def _draw_resistor(self, surface: pygame.Surface) -> None:
        lead_w = int(_RES_W * _LEAD_PCT)
        body_x = _RES_X + lead_w
        body_w = int(_RES_W * _BODY_PCT)
        cy     = _RES_Y + _RES_H // 2

        pygame.draw.line(surface, LEAD_COLOR, (_RES_X, cy), (body_x, cy), 2)
        pygame.draw.line(surface, LEAD_COLOR,
                         (body_x + body_w, cy), (_RES_X + _RES_W, cy), 2)

        body_rect = pygame.Rect(body_x, _RES_Y, body_w, _RES_H)
        radius = max(2, _RES_H // 3)
        pygame.draw.rect(surface, RESISTOR_TAN, body_rect, border_radius=radius)

        count = len(self.selection)
        for i, name in enumerate(self.selection):
            cx = int(body_x + (i + 1) / (count + 1) * body_w)
            band_rect = pygame.Rect(cx - _RES_BAND_W // 2, _RES_Y,
                                    _RES_BAND_W, _RES_H).clip(body_rect)
            if band_rect.width > 0 and band_rect.height > 0:
                pygame.draw.rect(surface, lookup(name).rgb, band_rect)

        # Re-draw the body outline to crisp up the rounded corners over bands
        pygame.draw.rect(surface, RESISTOR_TAN, body_rect,
                         width=2, border_radius=radius)

    def _draw_band_rows(self, surface: pygame.Surface, fnt: dict) -> None:
        for band_index, role in enumerate(self.layout):
            row_y = _ROWS_Y + band_index * _ROW_PITCH
            label_color = ACCENT if band_index == self.active_band else TEXT_MUTED
            _draw_text(surface, f"{band_index + 1}  {role.label}", fnt["small"],
                       label_color, _MARGIN, row_y + _SWATCH_H // 2,
                       anchor="midleft")

        for band_index, name, rect in self._swatch_rects:
            rgb = lookup(name).rgb
            enabled = name in self.valid_colors[band_index]
            fill = rgb if enabled else _blend(rgb, _DISABLED_ALPHA)
            pygame.draw.rect(surface, fill, rect, border_radius=4)
            if self.selection[band_index] == name:
                pygame.draw.rect(surface, ACCENT, rect.inflate(4, 4),
                                 width=2, border_radius=6)

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def on_enter(self) -> None:
        """Called when this screen becomes active."""
        pass

    def on_exit(self) -> None:
        """Called when this screen is deactivated."""
        self.active_band = 0
