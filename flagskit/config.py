"""
Configuration constants for the flag lookup library.
"""

import os

# Shown whenever a code cannot be resolved to a flag
WHITE_FLAG = "\U0001F3F3\uFE0F"  # 🏳️

# REGIONAL INDICATOR SYMBOL LETTER A; letters B-Z follow consecutively
REGIONAL_INDICATOR_A = 0x1F1E6
REGIONAL_INDICATOR_Z = REGIONAL_INDICATOR_A + 25

# Flag image assets
FLAG_IMAGES_DIR = os.path.join(os.path.dirname(__file__), 'flags')  # Override with FLAGSKIT_IMAGES_DIR
FLAG_IMAGE_EXTENSION = "png"

# Logging configuration (used by scripts, the library never configures handlers)
LOG_LEVEL = os.environ.get('FLAGSKIT_LOG_LEVEL', 'INFO').upper()
