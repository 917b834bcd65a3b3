"""Navigation structures recovered from an MkDocs configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..errors import AbstractTopicMissingError

ABSTRACT_CHAPTER_TITLE = "Abstract"


@dataclass(frozen=True)
class Topic:
    """A leaf navigation entry pointing at a content file."""

    title: str
    href: str


@dataclass(frozen=True)
class Chapter:
    """A navigation group and its topics, in file order."""

    title: str
    topics: Tuple[Topic, ...] = ()


@dataclass(frozen=True)
class NavigationDocument:
    """Title plus chapters; ``chapters[0]`` always holds the abstract."""

    title: str
    chapters: Tuple[Chapter, ...] = field(
        default_factory=lambda: (Chapter(title=ABSTRACT_CHAPTER_TITLE),)
    )

    def __post_init__(self) -> None:
        if not self.chapters:
            raise ValueError("A navigation document needs at least the abstract chapter")

    @property
    def abstract_chapter(self) -> Chapter:
        return self.chapters[0]

    @property
    def body_chapters(self) -> Tuple[Chapter, ...]:
        return self.chapters[1:]

    @property
    def topic_count(self) -> int:
        return sum(len(chapter.topics) for chapter in self.chapters)

    def abstract_topic(self) -> Topic:
        """Return the abstract topic or raise if the navigation has none."""

        topics = self.abstract_chapter.topics
        if not topics:
            raise AbstractTopicMissingError("abstract topic missing")
        return topics[0]


__all__ = [
    "ABSTRACT_CHAPTER_TITLE",
    "Chapter",
    "NavigationDocument",
    "Topic",
]
