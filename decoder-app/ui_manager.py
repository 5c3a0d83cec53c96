from __future__ import annotations

"""
Resistor Decoder - Pygame Display Manager

Owns pygame initialisation, the screen registry, and per-frame event / update /
draw dispatch.

The UIManager can be constructed in two modes:

  1. Hardware mode (no surface argument):
       mgr = UIManager()
     pygame.init() is called, a SCREEN_W×SCREEN_H display is created, and the
     frame clock is set up.

  2. Headless / test mode (surface provided):
       mgr = UIManager(surface)
     pygame is NOT initialised.  The supplied surface is used directly and
     display-flip / clock calls are skipped, so the class works with a
     MagicMock surface under SDL dummy mode.
"""

import logging

import pygame

import config

log = logging.getLogger(__name__)


class UIManager:
    """Manages registered screens and dispatches events, updates, and draws.

    Screens are registered by name and activated via switch_to().  Only the
    active screen receives update(), draw(), handle_event() and handle_touch()
    calls.

    Args:
        surface: Optional pygame.Surface for headless / test mode.
    """

    def __init__(self, surface=None) -> None:
        self._test_mode = surface is not None

        if self._test_mode:
            self._surface = surface
            self.clock    = None
        else:
            pygame.init()
            flags = pygame.FULLSCREEN if config.FULLSCREEN else 0
            self._surface = pygame.display.set_mode(
                (config.SCREEN_W, config.SCREEN_H), flags
            )
            pygame.display.set_caption("Resistor Decoder")
            self.clock = pygame.time.Clock()

        self.screen = self._surface   # alias used by screens in app mode

        self._screens: dict[str, object] = {}
        self._active: str | None = None
        self.current_screen: str | None = None

    # ------------------------------------------------------------------
    # Screen registry
    # ------------------------------------------------------------------

    def register_screen(self, name: str, screen_obj) -> None:
        """Add a screen to the registry under the given name.

        Args:
            name:       Unique string key (e.g. ``'decoder'``).
            screen_obj: Object implementing update, draw, handle_event and
                        optionally handle_touch / on_enter / on_exit.
        """
        self._screens[name] = screen_obj

    def switch_to(self, name: str) -> None:
        """Activate the named screen.

        Raises:
            KeyError: If *name* has not been registered.
        """
        if name not in self._screens:
            raise KeyError(f"Unknown screen: {name!r}")
        if self._active is not None and self._active != name:
            old = self._screens[self._active]
            if hasattr(old, "on_exit"):
                old.on_exit()
        self._active = name
        self.current_screen = name
        new = self._screens[name]
        if hasattr(new, "on_enter"):
            new.on_enter()
        log.debug("Switched to screen %r", name)

    # ------------------------------------------------------------------
    # Main-loop hooks
    # ------------------------------------------------------------------

    def handle_event(self, event) -> None:
        """Forward a single pygame event to the active screen (if any)."""
        if self._active is not None:
            self._screens[self._active].handle_event(event)

    def handle_events(self) -> bool:
        """Drain the pygame event queue and dispatch to the active screen.

        Mouse / touch presses go to ``handle_touch`` when the screen has one;
        everything else goes to ``handle_event``.

        Returns:
            ``False`` if the application should quit (QUIT or Escape pressed),
            ``True`` otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if self._active is None:
                continue
            screen = self._screens[self._active]
            if (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                    and hasattr(screen, "handle_touch")):
                screen.handle_touch(event.pos[0], event.pos[1])
            else:
                screen.handle_event(event)
        return True

    def update(self, dt: float) -> None:
        """Advance the active screen by *dt* seconds."""
        if self._active is not None:
            self._screens[self._active].update(dt)

    def draw(self) -> None:
        """Render the active screen, then flip the display in hardware mode."""
        if self._active is not None:
            self._screens[self._active].draw(self._surface)

        if not self._test_mode:
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(config.FPS)
