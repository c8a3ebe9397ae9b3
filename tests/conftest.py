from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from archivegen.pages import DEFAULT_LABELS

from helpers import TEMPLATE


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project root with a pages directory and a template, used as cwd."""
    (tmp_path / "pages").mkdir()
    templates = tmp_path / "_templates"
    templates.mkdir()
    (templates / "index.html").write_text(TEMPLATE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def build_args():
    def _make(**overrides) -> argparse.Namespace:
        values = {
            "pages": "pages",
            "template": "_templates/index.html",
            "output": "_site",
            "posts_per_page": 10,
            "label_prev": DEFAULT_LABELS["prev"],
            "label_next": DEFAULT_LABELS["next"],
            "label_page": DEFAULT_LABELS["page"],
            "label_copy": DEFAULT_LABELS["copy"],
            "custom_domain": "",
            "write_nojekyll": False,
        }
        values.update(overrides)
        return argparse.Namespace(**values)

    return _make
