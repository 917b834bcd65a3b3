"""Conversion pipeline shared by the CLI and build integrations.

A conversion reads one MkDocs navigation file, parses it, renders the
bookmap, moves the abstract into place when needed and finally writes the
ditamap into the target directory. Filesystem access goes through two
injectable callables so the pipeline can run against fakes in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union
import codecs
import logging
import os
import shutil
import time

from .bookmap import BookMapRenderer, FileRename
from .errors import (
    AbstractTopicMissingError,
    ConfigurationError,
    ConversionError,
    RenameError,
    SourceReadError,
    WriteError,
)
from .navigation.parser import NavigationParser

__all__ = [
    "AbstractTopicMissingError",
    "BookmapConverter",
    "ConfigurationError",
    "ConversionError",
    "ConversionOptions",
    "ConversionResult",
    "RenameError",
    "SourceReadError",
    "WriteError",
    "move_file",
    "write_text_file",
]

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_NAME = "document.ditamap"

RenameFile = Callable[[Path, Path], None]
WriteFile = Callable[[Path, str], None]


def move_file(source: Path, target: Path) -> None:
    if not source.exists():
        raise FileNotFoundError(f"Cannot move missing file: {source}")
    shutil.move(os.fspath(source), os.fspath(target))


def write_text_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@dataclass(frozen=True)
class ConversionOptions:
    """Where to read the navigation from and where to put the bookmap."""

    target_dir: Path
    source_file: Path
    output_name: str = DEFAULT_OUTPUT_NAME
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.target_dir is None or self.target_dir == "":
            raise ConfigurationError("You must supply a dir")
        if self.source_file is None or self.source_file == "":
            raise ConfigurationError("You must supply a file")
        if not self.output_name or Path(self.output_name).name != self.output_name:
            raise ConfigurationError(f"Invalid output name: {self.output_name!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(f"Unknown encoding: {self.encoding!r}", exc) from exc
        object.__setattr__(self, "target_dir", Path(self.target_dir))
        object.__setattr__(self, "source_file", Path(self.source_file))

    @classmethod
    def from_parameters(
        cls,
        dir: Union[Path, str, None] = None,
        file: Union[Path, str, None] = None,
        output_name: str = DEFAULT_OUTPUT_NAME,
        encoding: str = "utf-8",
    ) -> "ConversionOptions":
        """Validate the two required build parameters, ``dir`` first."""

        if not dir:
            raise ConfigurationError("You must supply a dir")
        if not file:
            raise ConfigurationError("You must supply a file")
        return cls(
            target_dir=Path(dir),
            source_file=Path(file),
            output_name=output_name,
            encoding=encoding,
        )

    @property
    def output_path(self) -> Path:
        return self.target_dir / self.output_name


@dataclass
class ConversionResult:
    """Outcome returned after a conversion run."""

    output_path: Path
    title: str
    chapter_count: int
    topic_count: int
    renamed: Optional[FileRename]
    elapsed_seconds: float


class BookmapConverter:
    """Read, parse, render, rename, write; strictly in that order."""

    def __init__(
        self,
        *,
        rename_file: Optional[RenameFile] = None,
        write_file: Optional[WriteFile] = None,
        parser: Optional[NavigationParser] = None,
        renderer: Optional[BookMapRenderer] = None,
    ) -> None:
        self.rename_file = rename_file or move_file
        self.write_file = write_file or write_text_file
        self.parser = parser or NavigationParser()
        self.renderer = renderer or BookMapRenderer()

    # Public API -----------------------------------------------------------------
    def convert(self, options: ConversionOptions) -> ConversionResult:
        start_time = time.perf_counter()
        logger.debug("Starting conversion with options: %s", options)

        raw_text = self._load_text(options.source_file, options.encoding)
        logger.debug("Loaded %d characters from %s", len(raw_text), options.source_file)

        document = self.parser.parse(raw_text)
        rendered = self.renderer.render(document, options.target_dir)

        if rendered.rename is not None:
            self._rename(rendered.rename)

        output_path = self._write_output(rendered.xml, options.output_path)

        elapsed = time.perf_counter() - start_time
        logger.info("Finished conversion in %.2fs", elapsed)

        return ConversionResult(
            output_path=output_path,
            title=document.title,
            chapter_count=len(document.body_chapters),
            topic_count=document.topic_count,
            renamed=rendered.rename,
            elapsed_seconds=elapsed,
        )

    # Input handling --------------------------------------------------------------
    def _load_text(self, path: Path, encoding: str) -> str:
        try:
            try:
                return path.read_text(encoding=encoding)
            except UnicodeDecodeError:
                logger.warning("Failed to decode %s as %s; attempting latin-1", path, encoding)
                return path.read_text(encoding="latin-1")
        except OSError as exc:
            raise SourceReadError("Unable to read file", exc) from exc

    # Output handling -------------------------------------------------------------
    def _rename(self, rename: FileRename) -> None:
        try:
            self.rename_file(rename.source, rename.target)
        except OSError as exc:
            raise RenameError(f"Unable to move {rename.source} to {rename.target}", exc) from exc
        logger.info("Moved %s to %s", rename.source, rename.target)

    def _write_output(self, xml: str, output_path: Path) -> Path:
        try:
            self.write_file(output_path, xml)
        except OSError as exc:
            raise WriteError(f"Unable to write {output_path}", exc) from exc
        logger.info("Wrote bookmap to %s", output_path)
        return output_path
