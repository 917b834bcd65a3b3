from __future__ import annotations

import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


SAMPLE_NAVIGATION = """\
site_name: Sample
pages:
  - index.md
  - Guide:
    - Intro: intro.md
    - Setup: setup.md
"""


@pytest.fixture
def sample_navigation() -> str:
    return SAMPLE_NAVIGATION


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """A target directory laid out like an MkDocs ``docs`` folder."""

    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "index.md").write_text("# Welcome\n", encoding="utf-8")
    (docs / "intro.md").write_text("# Intro\n", encoding="utf-8")
    (docs / "setup.md").write_text("# Setup\n", encoding="utf-8")
    (tmp_path / "mkdocs.yml").write_text(SAMPLE_NAVIGATION, encoding="utf-8")
    return docs
