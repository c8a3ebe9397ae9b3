from __future__ import annotations

import argparse

import pytest

from archivegen.config import load_config, resolve_labels


def test_load_config_missing_file_returns_empty(tmp_path):
    assert load_config(tmp_path / "site.toml") == {}


def test_load_config_toml(tmp_path):
    path = tmp_path / "site.toml"
    path.write_text('pages = "articles"\nposts_per_page = 20\n', encoding="utf-8")
    assert load_config(path) == {"pages": "articles", "posts_per_page": 20}


def test_load_config_yaml(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("output: public\nlabel_copy: Copy link\n", encoding="utf-8")
    assert load_config(path) == {"output": "public", "label_copy": "Copy link"}


def test_load_config_empty_yaml(tmp_path):
    path = tmp_path / "site.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


def test_load_config_json(tmp_path):
    path = tmp_path / "site.json"
    path.write_text('{"write_nojekyll": true}', encoding="utf-8")
    assert load_config(path) == {"write_nojekyll": True}


@pytest.mark.parametrize(
    "name,text,message",
    [
        ("site.toml", "pages = ", "Invalid TOML"),
        ("site.yaml", "a: [1, 2", "Invalid YAML"),
        ("site.yaml", "- a\n- b\n", "YAML config must be a mapping"),
        ("site.json", "{", "Invalid JSON"),
        ("site.json", "[1]", "JSON config must be a mapping"),
    ],
)
def test_load_config_invalid_exits(tmp_path, capsys, name, text, message):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        load_config(path)
    assert excinfo.value.code == 1
    assert message in capsys.readouterr().err


def test_resolve_labels():
    args = argparse.Namespace(label_prev="<", label_next=">", label_page="{page}/{total}", label_copy="copy")
    assert resolve_labels(args) == {"prev": "<", "next": ">", "page": "{page}/{total}", "copy": "copy"}


@pytest.mark.parametrize("label", ["page {page", "page {pages}", "page {0}"])
def test_resolve_labels_rejects_bad_page_format(capsys, label):
    args = argparse.Namespace(label_prev="<", label_next=">", label_page=label, label_copy="copy")
    with pytest.raises(SystemExit) as excinfo:
        resolve_labels(args)
    assert excinfo.value.code == 1
    assert "Invalid label_page" in capsys.readouterr().err
