"""Defaults and fixed constants."""

import logging

SERVER_NAME = "highlight-svg"
TOOL_NAME = "highlight_svg"

DEFAULT_LANGUAGE = "javascript"
DEFAULT_WIDTH = 800
DEFAULT_PADDING = 16
DEFAULT_BACKGROUND = "#1e1e1e"
DEFAULT_FONT_SIZE = 14
DEFAULT_FONT_FAMILY = (
    "ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, "
    "'Liberation Mono', 'Courier New', monospace"
)
DEFAULT_COLOR_SCHEME = "light dark"

DEFAULT_PALETTE = {
    "foreground": "#d4d4d4",
    "comment": "#6a9955",
    "string": "#ce9178",
    "keyword": "#569cd6",
    "function": "#dcdcaa",
    "number": "#b5cea8",
    "operator": "#d4d4d4",
}

# Categories that get a color rule in the stylesheet, in emission order.
STYLED_CATEGORIES = ("comment", "string", "keyword", "function", "number", "operator")

LINE_HEIGHT = 1.4
CORNER_RADIUS = 8

FALLBACK_LANGUAGE = "javascript"

# Prism language ids that Pygments knows under another name.
LANGUAGE_ALIASES = {
    "markup": "html",
    "clike": "c",
    "svg": "xml",
    "mathml": "xml",
    "ssml": "xml",
    "atom": "xml",
    "rss": "xml",
}

PRELOADED_LANGUAGES = ("markup", "clike", "javascript")

LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
