"""
Resistor Decoder - App Configuration
"""

import logging

# Touchscreen display
SCREEN_W   = 480
SCREEN_H   = 320
FULLSCREEN = False
FPS        = 30

# Band count shown at start-up (3, 4, 5 or 6)
DEFAULT_BAND_COUNT = 4

# Logging
LOG_LEVEL  = logging.INFO
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
