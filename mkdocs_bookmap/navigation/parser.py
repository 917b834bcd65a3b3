"""Line-oriented reader for the ``site_name``/``pages`` subset of mkdocs.yml."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional

from ..text.normalize import normalize
from . import ABSTRACT_CHAPTER_TITLE, Chapter, NavigationDocument, Topic

LOGGER = logging.getLogger(__name__)

SITE_NAME_KEY = "site_name:"
PAGES_KEY = "pages:"
LIST_MARKER = "-"
COMMENT_MARKER = "#"


@dataclass
class _ChapterBuilder:
    title: str
    topics: List[Topic] = field(default_factory=list)

    def freeze(self) -> Chapter:
        return Chapter(title=self.title, topics=tuple(self.topics))


class NavigationParser:
    """Recover the title and chapter/topic outline from navigation text.

    Only three shapes are recognised: ``site_name: <value>``, the ``pages:``
    block opener, and list entries inside that block. An entry ending in
    ``:`` opens a chapter; any other entry is a topic of the current chapter.
    Topics listed before the first chapter belong to the abstract chapter.
    Everything else is skipped without error.
    """

    def __init__(self, *, tab_size: int = 4) -> None:
        self.tab_size = tab_size

    def parse(self, text: str) -> NavigationDocument:
        title = ""
        chapters = [_ChapterBuilder(title=ABSTRACT_CHAPTER_TITLE)]
        current_chapter = 0
        in_pages_block = False
        pages_indent = 0

        for number, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line:
                continue

            if line.startswith(SITE_NAME_KEY):
                title = normalize(line, SITE_NAME_KEY)
                LOGGER.debug("Line %d: site title %r", number, title)
            elif line.startswith(PAGES_KEY):
                in_pages_block = True
                pages_indent = self._indent_of(raw_line)
                LOGGER.debug("Line %d: entering pages block", number)
            elif in_pages_block:
                if line.startswith(COMMENT_MARKER):
                    continue
                if not line.startswith(LIST_MARKER):
                    if ":" in line and self._indent_of(raw_line) <= pages_indent:
                        in_pages_block = False
                        LOGGER.debug("Line %d: pages block closed by %r", number, line)
                    continue
                if line.endswith(":"):
                    chapter_title = normalize(line[:-1], LIST_MARKER)
                    chapters.append(_ChapterBuilder(title=chapter_title))
                    current_chapter += 1
                    LOGGER.debug("Line %d: chapter %r", number, chapter_title)
                    continue
                topic = self._parse_topic(line)
                if topic is None:
                    LOGGER.warning("Line %d: skipping navigation entry without a target: %r", number, line)
                    continue
                chapters[current_chapter].topics.append(topic)
                LOGGER.debug("Line %d: topic %r -> %s", number, topic.title, topic.href)

        document = NavigationDocument(
            title=title,
            chapters=tuple(chapter.freeze() for chapter in chapters),
        )
        LOGGER.info(
            "Parsed navigation %r: %d chapters, %d topics",
            document.title,
            len(document.body_chapters),
            document.topic_count,
        )
        return document

    def _parse_topic(self, line: str) -> Optional[Topic]:
        entry = line[len(LIST_MARKER):]
        name, separator, target = entry.partition(":")
        if not separator:
            name, target = "", entry
        href = normalize(target)
        if not href:
            return None
        return Topic(title=normalize(name), href=href)

    def _indent_of(self, raw_line: str) -> int:
        expanded = raw_line.expandtabs(self.tab_size)
        return len(expanded) - len(expanded.lstrip())


def parse(text: str) -> NavigationDocument:
    """Parse navigation *text* with default settings."""

    return NavigationParser().parse(text)


__all__ = ["NavigationParser", "parse"]
