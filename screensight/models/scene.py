"""Input model — classified components and recognized text supplied by upstream stages.

Nothing in the engine mutates these; analyses read them and allocate fresh reports.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from screensight.models.geometry import Position


class ComponentType(str, enum.Enum):
    BUTTON = "button"
    INPUT = "input"
    CARD = "card"
    IMAGE = "image"
    NAVIGATION = "navigation"
    TEXT = "text"
    HEADER = "header"
    FOOTER = "footer"
    PARAGRAPH = "paragraph"
    LABEL = "label"
    LINK = "link"
    CONTAINER = "container"
    SIDEBAR = "sidebar"
    MAIN = "main"
    RECTANGLE = "rectangle"
    ICON = "icon"
    FORM = "form"
    CONTENT = "content"
    UNKNOWN = "unknown"


class TextType(str, enum.Enum):
    HEADER = "header"
    LABEL = "label"
    BUTTON = "button"
    NAVIGATION = "navigation"
    LINK = "link"
    FORM = "form"
    PARAGRAPH = "paragraph"
    SHORT_TEXT = "short_text"
    TEXT = "text"


class FontSizeCategory(str, enum.Enum):
    SMALL = "small"
    NORMAL = "normal"
    MEDIUM = "medium"
    LARGE = "large"


class FontInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    estimated_size: float | None = None
    size_category: FontSizeCategory = FontSizeCategory.NORMAL


class Component(BaseModel):
    """A box the upstream classifier labelled with a UI category."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: ComponentType = ComponentType.UNKNOWN
    position: Position = Field(default_factory=Position)
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    text_content: str | None = None
    aspect_ratio: float | None = None

    @property
    def text(self) -> str:
        return self.text_content or ""


class TextElement(BaseModel):
    """A recognized text fragment with its box and coarse role."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: TextType = TextType.TEXT
    text: str = ""
    position: Position = Field(default_factory=Position)
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    font_info: FontInfo | None = None

    @property
    def is_label(self) -> bool:
        return self.type == TextType.LABEL or self.text.rstrip().endswith(":")

    @property
    def is_large(self) -> bool:
        return self.font_info is not None and self.font_info.size_category == FontSizeCategory.LARGE
