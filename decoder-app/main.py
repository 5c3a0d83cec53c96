"""
Resistor Decoder - Main Entry Point

Builds the Pygame UI and runs the main event loop.

Frame flow
----------
  Every frame:
    1. mgr.handle_events() → band-count tabs, swatch taps, arrow keys
    2. mgr.update(dt)
    3. mgr.draw() → ScreenDecoder decodes the current selection and renders
                    value, tolerance, temp. coefficient and range
"""

import logging
import sys
import time

import pygame

import config
from screen_decoder import ScreenDecoder
from ui_manager import UIManager

logging.basicConfig(
    level=config.LOG_LEVEL,
    format=config.LOG_FORMAT,
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


def main() -> None:
    mgr = UIManager()

    decoder = ScreenDecoder(mgr, band_count=config.DEFAULT_BAND_COUNT)
    mgr.register_screen("decoder", decoder)
    mgr.switch_to("decoder")

    log.info("Resistor Decoder started (%d-band)", config.DEFAULT_BAND_COUNT)

    last_t = time.monotonic()

    try:
        running = True
        while running:
            now = time.monotonic()
            dt  = now - last_t
            last_t = now

            running = mgr.handle_events()
            mgr.update(dt)
            mgr.draw()
    finally:
        pygame.quit()
        log.info("Pygame quit")


if __name__ == "__main__":
    main()
