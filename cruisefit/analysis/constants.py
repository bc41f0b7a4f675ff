"""
Analysis Constants
"""

# Color channel range
CHANNEL_MAX: int = 255

# Terminal output (24-bit ANSI escapes)
ANSI_FOREGROUND = "\x1b[38;2;{r};{g};{b}m"
ANSI_RESET = "\x1b[0m"

# Report layout
RULE_WIDTH: int = 70
REPORT_FORMATS = ("txt",)
