"""Serialize a navigation outline as a DITA BookMap."""

from __future__ import annotations

from dataclasses import dataclass
import html
import logging
from pathlib import Path
from typing import List, Optional, Union

from .navigation import Chapter, NavigationDocument

LOGGER = logging.getLogger(__name__)

INDEX_FILENAME = "index.md"
ABSTRACT_FILENAME = "abstract.md"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
BOOKMAP_DOCTYPE = '<!DOCTYPE bookmap\n  PUBLIC "-//OASIS//DTD DITA BookMap//EN" "bookmap.dtd">'


def escape_xml(text: str) -> str:
    return html.escape(text, quote=False)


def escape_xml_attr(text: str) -> str:
    return html.escape(text, quote=True)


@dataclass(frozen=True)
class FileRename:
    """A move the filesystem must perform before the bookmap is written."""

    source: Path
    target: Path


@dataclass(frozen=True)
class RenderResult:
    xml: str
    rename: Optional[FileRename] = None


class BookMapRenderer:
    """Build bookmap markup with the abstract in the frontmatter.

    Chapter 0 of the navigation supplies the ``<bookabstract>``; every later
    chapter becomes a ``<chapter>`` holding one ``<topicref>`` per topic.
    MkDocs sites keep their landing page in ``index.md``, which is moved to
    ``abstract.md`` so the name does not clash with the generated output.
    """

    def __init__(self, *, topic_format: str = "md") -> None:
        self.topic_format = topic_format

    def render(self, document: NavigationDocument, base_dir: Union[Path, str]) -> RenderResult:
        base_dir = Path(base_dir)
        abstract_href = document.abstract_topic().href
        extra = len(document.abstract_chapter.topics) - 1
        if extra:
            LOGGER.warning("Ignoring %d extra topic(s) listed before the first chapter", extra)

        rename: Optional[FileRename] = None
        if abstract_href == INDEX_FILENAME:
            rename = FileRename(
                source=base_dir / INDEX_FILENAME,
                target=base_dir / ABSTRACT_FILENAME,
            )
            abstract_href = ABSTRACT_FILENAME
            LOGGER.debug("Abstract %s will be renamed to %s", INDEX_FILENAME, ABSTRACT_FILENAME)

        lines: List[str] = [
            XML_DECLARATION,
            BOOKMAP_DOCTYPE,
            "<bookmap>",
            f"  <title>{escape_xml(document.title)}</title>",
            "  <frontmatter>",
            f'    <bookabstract format="{self.topic_format}" href="{escape_xml_attr(abstract_href)}"/>',
            "    <booklists>",
            "      <toc/>",
            "    </booklists>",
            "  </frontmatter>",
        ]
        for chapter in document.body_chapters:
            lines.extend(self._render_chapter(chapter))
        lines.append("</bookmap>")

        LOGGER.debug("Rendered bookmap with %d chapters", len(document.body_chapters))
        return RenderResult(xml="\n".join(lines) + "\n", rename=rename)

    def _render_chapter(self, chapter: Chapter) -> List[str]:
        lines = [
            "  <chapter>",
            "    <topicmeta>",
            f"     <navtitle>{escape_xml(chapter.title)}</navtitle>",
            "   </topicmeta>",
        ]
        for topic in chapter.topics:
            lines.append(
                f'    <topicref format="{self.topic_format}" href="{escape_xml_attr(topic.href)}"/>'
            )
        lines.append("  </chapter>")
        return lines


def render(document: NavigationDocument, base_dir: Union[Path, str]) -> RenderResult:
    """Render *document* with default settings."""

    return BookMapRenderer().render(document, base_dir)


__all__ = [
    "ABSTRACT_FILENAME",
    "BookMapRenderer",
    "FileRename",
    "INDEX_FILENAME",
    "RenderResult",
    "render",
]
