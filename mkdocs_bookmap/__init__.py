"""Convert MkDocs navigation into DITA BookMap documents."""

from __future__ import annotations

__version__ = "0.1.0"

from .bookmap import BookMapRenderer, FileRename, RenderResult, render
from .converter import BookmapConverter, ConversionOptions, ConversionResult
from .errors import (
    AbstractTopicMissingError,
    ConfigurationError,
    ConversionError,
    RenameError,
    SourceReadError,
    WriteError,
)
from .navigation import Chapter, NavigationDocument, Topic
from .navigation.parser import NavigationParser, parse
from .text.normalize import normalize

__all__ = [
    "AbstractTopicMissingError",
    "BookMapRenderer",
    "BookmapConverter",
    "Chapter",
    "ConfigurationError",
    "ConversionError",
    "ConversionOptions",
    "ConversionResult",
    "FileRename",
    "NavigationDocument",
    "NavigationParser",
    "RenameError",
    "RenderResult",
    "SourceReadError",
    "Topic",
    "WriteError",
    "normalize",
    "parse",
    "render",
]
