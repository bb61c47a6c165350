"""Request-scoped value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Palette(BaseModel):
    """Partial color overrides, one per syntactic category."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    background: Optional[str] = Field(default=None, description="Canvas fill color")
    foreground: Optional[str] = Field(default=None, description="Default text color")
    comment: Optional[str] = Field(default=None, description="Comment color")
    string: Optional[str] = Field(default=None, description="String literal color")
    keyword: Optional[str] = Field(default=None, description="Keyword color")
    function: Optional[str] = Field(default=None, description="Function name color")
    number: Optional[str] = Field(default=None, description="Number literal color")
    operator: Optional[str] = Field(default=None, description="Operator color")


class RenderRequest(BaseModel):
    """Fully-defaulted render parameters."""

    model_config = ConfigDict(frozen=True)

    code: str
    language: str
    width: float
    padding: float
    background: str
    font_size: float
    font_family: str
    palette: Optional[Palette] = None
    color_scheme: str


@dataclass(frozen=True)
class ResolvedTheme:
    background: str
    foreground: str
    comment: str
    string: str
    keyword: str
    function: str
    number: str
    operator: str
    color_scheme: str
