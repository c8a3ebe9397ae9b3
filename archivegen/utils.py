from __future__ import annotations

import shutil
import sys
from pathlib import Path


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False


def parse_int(value: object, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def write_nojekyll(output_dir: Path) -> None:
    output_dir.joinpath(".nojekyll").write_text("", encoding="utf-8")


def write_cname(output_dir: Path, domain: str) -> None:
    output_dir.joinpath("CNAME").write_text(f"{domain}\n", encoding="utf-8")


def refuse(message: str) -> None:
    print(message, file=sys.stderr)
    sys.exit(1)


def check_output_dir(output_dir: Path, project_root: Path, pages_dir: Path) -> None:
    """Exit unless the output tree is safe to wipe on every run.

    It must sit strictly inside the project root and must not overlap the
    pages directory in either direction.
    """
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    pages_resolved = pages_dir.resolve()
    if output_resolved == root_resolved:
        refuse("Refusing to clean project root.")
    if not output_resolved.is_relative_to(root_resolved):
        refuse(f"Refusing to clean output directory outside project root: {output_dir}")
    if pages_resolved.is_relative_to(output_resolved):
        refuse(f"Output directory {output_dir} would delete pages directory {pages_dir}.")
    if output_resolved.is_relative_to(pages_resolved):
        refuse(f"Output directory {output_dir} must not be inside pages directory {pages_dir}.")


def clean_output_dir(output_dir: Path) -> None:
    if output_dir.exists():
        shutil.rmtree(output_dir)
