"""Colour and font constants for the lollipop diagram app."""

BACKGROUND = "#FFFFFF"
PANEL_BG = "#F4F4F2"
BORDER = "#D3D7CF"
TEXT = "#2E3436"
MUTED = "#888A85"

SEQUENCE_FILL = "#BABDB6"   # protein sequence bar
STEM_COLOR = "#BABDB6"      # lollipop lines
MARKER_BORDER = "#BABDB6"
MARKER_FALLBACK = "#BB0000"  # palette has no colour for the pileup
AXIS_COLOR = "#AAAAAA"

FONT_STACK = "sans-serif"
FONT_SIZE = 10

DIMMED_ALPHA = 0.35         # non-highlighted lollipops while others are highlighted

SIDEBAR_WIDTH = "300px"
