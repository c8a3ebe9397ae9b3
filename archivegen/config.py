from __future__ import annotations

import json
import sys
from pathlib import Path

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

import yaml


def load_config(path: Path) -> dict:
    """Read a TOML, YAML or JSON config file, picked by suffix.

    A missing file is not an error: the built-in defaults apply.
    """
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            print(f"Invalid TOML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        return data
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            print(f"Invalid YAML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if data is None:
            return {}
        if not isinstance(data, dict):
            print(f"YAML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"JSON config must be a mapping: {path}", file=sys.stderr)
        sys.exit(1)
    return data


def resolve_labels(args: object) -> dict:
    labels = {
        "prev": args.label_prev,
        "next": args.label_next,
        "page": args.label_page,
        "copy": args.label_copy,
    }
    try:
        labels["page"].format(page=1, total=1)
    except (KeyError, IndexError, ValueError) as exc:
        print(f"Invalid label_page {labels['page']!r}: use only {{page}} and {{total}} fields ({exc!r})", file=sys.stderr)
        sys.exit(1)
    return labels
