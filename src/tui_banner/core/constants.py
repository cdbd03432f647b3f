"""Shared constants for banner rendering."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Block and shade characters commonly used as glyph ink
BLOCK = {
    "full": "█",       # Full block
    "upper": "▀",      # Upper half block
    "lower": "▄",      # Lower half block
    "left": "▌",       # Left half block
    "right": "▐",      # Right half block
    "light": "░",      # Light shade
    "medium": "▒",     # Medium shade
    "dark": "▓",       # Dark shade
}

# Fill.Blocks replacement character
BLOCKS_CHAR = "#"

# Glyphs replaced by dot dithering when no targets are configured
DEFAULT_DITHER_TARGETS = (BLOCK["light"], BLOCK["medium"])

# Dot character used when a dither is given no dots
DEFAULT_DOT = "·"

# FIGlet printable range (inclusive)
FIGLET_FIRST_CODE = 32
FIGLET_LAST_CODE = 126
FIGLET_MAGIC = "flf2a"
