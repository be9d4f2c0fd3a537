"""Pure parsing and rendering of tag records."""

from .template import Bare, Delimited, Literal, Segment, Template, render
from .title_parser import TitleParser

__all__ = ["Bare", "Delimited", "Literal", "Segment", "Template", "TitleParser", "render"]
