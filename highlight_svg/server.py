"""MCP stdio server exposing the ``highlight_svg`` tool."""

import logging
import sys
from typing import Annotated, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent
from pydantic import Field

from highlight_svg.config import (
    DEFAULT_BACKGROUND,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_LANGUAGE,
    DEFAULT_PADDING,
    DEFAULT_WIDTH,
    LOG_FORMAT,
    LOG_LEVEL,
    SERVER_NAME,
    TOOL_NAME,
)
from highlight_svg.grammars import GrammarRegistry
from highlight_svg.models import Palette
from highlight_svg.render import render_highlighted_svg

logger = logging.getLogger(__name__)

TOOL_DESCRIPTION = "Render highlighted code as an SVG using Pygments."


def make_highlight_tool(registry: GrammarRegistry):
    async def highlight_svg(
        code: Annotated[str, Field(description="Source code to highlight")],
        language: Annotated[
            str,
            Field(description="Language id (e.g., javascript, typescript, jsx, tsx, python)"),
        ] = DEFAULT_LANGUAGE,
        width: Annotated[float, Field(description="SVG width in px")] = DEFAULT_WIDTH,
        padding: Annotated[float, Field(description="Padding around content in px")] = DEFAULT_PADDING,
        background: Annotated[str, Field(description="Background color")] = DEFAULT_BACKGROUND,
        fontSize: Annotated[float, Field(description="Font size in px")] = DEFAULT_FONT_SIZE,
        fontFamily: Annotated[str, Field(description="Font family stack")] = DEFAULT_FONT_FAMILY,
        palette: Annotated[
            Optional[Palette],
            Field(description="Per-category color overrides; palette.background wins over background"),
        ] = None,
        colorSchema: Annotated[
            str, Field(description="CSS color-scheme value")
        ] = DEFAULT_COLOR_SCHEME,
        colorScheme: Annotated[
            Optional[str], Field(description="Alias of colorSchema; wins when both are given")
        ] = None,
    ) -> TextContent:
        svg = render_highlighted_svg(
            {
                "code": code,
                "language": language,
                "width": width,
                "padding": padding,
                "background": background,
                "fontSize": fontSize,
                "fontFamily": fontFamily,
                "palette": palette,
                "colorSchema": colorSchema,
                "colorScheme": colorScheme,
            },
            registry,
        )
        return TextContent(type="text", text=svg)

    return highlight_svg


def register(mcp: FastMCP, *, registry: GrammarRegistry) -> None:
    mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION, structured_output=False)(
        make_highlight_tool(registry)
    )


def create_server(registry: Optional[GrammarRegistry] = None) -> FastMCP:
    mcp = FastMCP(SERVER_NAME)
    register(mcp, registry=registry or GrammarRegistry())
    return mcp


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stderr)
    try:
        create_server().run()
    except Exception:
        logger.exception("highlight-svg server failed")
        sys.exit(1)
