from __future__ import annotations

import shutil
import sys
from pathlib import Path

PLACEHOLDERS = {
    "archives": "<!-- ARCHIVES_PLACEHOLDER -->",
    "pagination": "<!-- PAGINATION_PLACEHOLDER -->",
    "year": "<!-- YEAR_PLACEHOLDER -->",
}


def render_template(template: str, **context: str) -> str:
    output = template
    for key, value in context.items():
        # Each marker appears once in the template; never replace beyond the first.
        output = output.replace(PLACEHOLDERS[key], value, 1)
    return output


def read_template(path: Path) -> str:
    if not path.is_file():
        print(f"Template not found: {path}", file=sys.stderr)
        sys.exit(1)
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_static(static_dir: Path, dest: Path) -> None:
    if dest.exists():
        shutil.rmtree(dest)
    shutil.copytree(static_dir, dest)
