from __future__ import annotations

import argparse
import datetime as dt
import sys
import time
from pathlib import Path

from .config import load_config, resolve_labels
from .content import ASSETS_SUBDIR, load_articles
from .pages import DEFAULT_LABELS, build_index, count_pages
from .render import copy_static, read_template
from .utils import check_output_dir, clean_output_dir, parse_bool, parse_int, write_cname, write_nojekyll

POSTS_PER_PAGE = 10


def build_site(args: argparse.Namespace) -> int:
    pages_dir = Path(args.pages)
    template_path = Path(args.template)
    output_dir = Path(args.output)
    project_root = Path.cwd()

    if not pages_dir.is_dir():
        print(f"Pages directory not found: {pages_dir}", file=sys.stderr)
        sys.exit(1)
    check_output_dir(output_dir, project_root, pages_dir)
    labels = resolve_labels(args)

    clean_output_dir(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    print(f"Cleaned and created directory: {output_dir}")

    copy_static(pages_dir, output_dir / ASSETS_SUBDIR)
    print(f"Copied '{pages_dir}' directory to {output_dir}")

    custom_domain = (args.custom_domain or "").strip()
    if custom_domain:
        write_cname(output_dir, custom_domain)
    if args.write_nojekyll:
        write_nojekyll(output_dir)

    articles = load_articles(pages_dir)
    if not articles:
        print("No articles found. Site generation stopped.")
        return 0

    per_page = max(1, args.posts_per_page)
    print(f"Found {len(articles)} articles, {count_pages(len(articles), per_page)} pages.")
    template = read_template(template_path)
    year = str(dt.date.today().year)

    total_pages = build_index(template, output_dir, articles, per_page, year, labels)
    print(f"\nTotal pages built: {total_pages}")
    return total_pages


def main(argv: list[str] | None = None) -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to site config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))

    def cfg_value(key: str, default: object) -> object:
        value = config.get(key)
        return default if value is None else value

    def cfg_str(key: str, default: str) -> str:
        return str(cfg_value(key, default))

    def cfg_bool(key: str, default: bool) -> bool:
        return parse_bool(cfg_value(key, default))

    def cfg_int(key: str, default: int) -> int:
        return parse_int(cfg_value(key, default), default)

    parser = argparse.ArgumentParser(description="Paginated archive generator for pre-rendered HTML articles.")
    parser.add_argument("--config", default=pre_args.config, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--pages", default=cfg_str("pages", "pages"), help="Directory containing article HTML files.")
    parser.add_argument(
        "--template",
        default=cfg_str("template", "_templates/index.html"),
        help="HTML template with the archive, pagination and year placeholders.",
    )
    parser.add_argument("--output", default=cfg_str("output", "_site"), help="Output directory for the site.")
    parser.add_argument(
        "--posts-per-page",
        default=cfg_int("posts_per_page", POSTS_PER_PAGE),
        type=int,
        help="Number of articles per archive page.",
    )
    parser.add_argument("--label-prev", default=cfg_str("label_prev", DEFAULT_LABELS["prev"]), help="Previous page link text.")
    parser.add_argument("--label-next", default=cfg_str("label_next", DEFAULT_LABELS["next"]), help="Next page link text.")
    parser.add_argument(
        "--label-page",
        default=cfg_str("label_page", DEFAULT_LABELS["page"]),
        help="Page indicator format, with {page} and {total} fields.",
    )
    parser.add_argument("--label-copy", default=cfg_str("label_copy", DEFAULT_LABELS["copy"]), help="Copy link button text.")
    parser.add_argument(
        "--custom-domain",
        default=cfg_str("custom_domain", ""),
        help="Custom domain to write into CNAME.",
    )
    parser.add_argument(
        "--write-nojekyll",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("write_nojekyll", False),
        help="Write .nojekyll in the output directory.",
    )
    args = parser.parse_args(argv)
    start = time.perf_counter()
    total_pages = build_site(args)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    if total_pages:
        print(f"Site generated in: {args.output}")
