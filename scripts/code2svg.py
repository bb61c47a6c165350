#!/usr/bin/env python3
"""Render a code snippet to a syntax-highlighted SVG file."""

import sys
import json
import os
import hashlib

from highlight_svg.grammars import GrammarRegistry
from highlight_svg.render import render_highlighted_svg

OUTPUT_DIR = "/tmp/highlight-svg"


def render(params: dict, output_dir: str = OUTPUT_DIR) -> str:
    """Render code to SVG, return the file path."""
    os.makedirs(output_dir, exist_ok=True)

    svg = render_highlighted_svg(params, GrammarRegistry())

    # Same input, same file
    h = hashlib.md5(svg.encode("utf-8")).hexdigest()[:12]
    out_path = os.path.join(output_dir, f"code_{h}.svg")

    with open(out_path, "w", encoding="utf-8") as f:
        f.write(svg)

    return out_path


if __name__ == "__main__":
    # Read JSON from stdin: {"code": "...", "language": "python", ...}
    data = json.load(sys.stdin)
    path = render(data)
    print(path)
