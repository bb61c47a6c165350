"""Turn raw tool arguments into a fully-populated render configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from highlight_svg.config import (
    DEFAULT_BACKGROUND,
    DEFAULT_COLOR_SCHEME,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    DEFAULT_LANGUAGE,
    DEFAULT_PADDING,
    DEFAULT_PALETTE,
    DEFAULT_WIDTH,
)
from highlight_svg.models import Palette, RenderRequest, ResolvedTheme


def _pick(raw: Mapping[str, Any], key: str, default: Any) -> Any:
    value = raw.get(key)
    return default if value is None else value


def resolve_color_scheme(
    color_scheme: Optional[str] = None, color_schema: Optional[str] = None
) -> str:
    """Pick the scheme string: ``colorScheme`` first, then ``colorSchema``, then the default."""
    if color_scheme is not None:
        return color_scheme
    if color_schema is not None:
        return color_schema
    return DEFAULT_COLOR_SCHEME


def _resolve_palette(value: Any) -> Optional[Palette]:
    if value is None or isinstance(value, Palette):
        return value
    return Palette.model_validate(value)


def resolve_request(raw: Mapping[str, Any]) -> RenderRequest:
    """Apply every default to a raw parameter mapping.

    Keys use the tool's wire names (``fontSize``, ``colorScheme``, ...).
    Missing or ``None`` values take the default; unknown keys are ignored.
    Numeric values are not range-checked.
    """
    return RenderRequest(
        code=_pick(raw, "code", ""),
        language=_pick(raw, "language", DEFAULT_LANGUAGE),
        width=_pick(raw, "width", DEFAULT_WIDTH),
        padding=_pick(raw, "padding", DEFAULT_PADDING),
        background=_pick(raw, "background", DEFAULT_BACKGROUND),
        font_size=_pick(raw, "fontSize", DEFAULT_FONT_SIZE),
        font_family=_pick(raw, "fontFamily", DEFAULT_FONT_FAMILY),
        palette=_resolve_palette(raw.get("palette")),
        color_scheme=resolve_color_scheme(raw.get("colorScheme"), raw.get("colorSchema")),
    )


def resolve_theme(request: RenderRequest) -> ResolvedTheme:
    """Merge the request palette over the built-in category colors."""
    overrides = request.palette.model_dump(exclude_none=True) if request.palette else {}
    colors = {key: overrides.get(key, default) for key, default in DEFAULT_PALETTE.items()}
    return ResolvedTheme(
        background=overrides.get("background", request.background),
        color_scheme=request.color_scheme,
        **colors,
    )
