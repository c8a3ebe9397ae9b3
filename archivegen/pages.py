from __future__ import annotations

import math
from pathlib import Path

from .content import Article, group_by_date
from .render import render_template, write_text

ARCHIVES_DIR = "archives"
DEFAULT_LABELS = {
    "prev": "« 上一页",
    "next": "下一页 »",
    "page": "第 {page} / {total} 页",
    "copy": "复制链接",
}


def escape_attr(text: str) -> str:
    return text.replace('"', "&quot;")


def count_pages(article_count: int, per_page: int) -> int:
    per_page = max(1, per_page)
    return math.ceil(article_count / per_page)


def paginate(articles: list[Article], per_page: int) -> list[list[Article]]:
    per_page = max(1, per_page)
    total_pages = count_pages(len(articles), per_page)
    return [articles[(page - 1) * per_page : page * per_page] for page in range(1, total_pages + 1)]


def page_link(page: int) -> str:
    if page == 1:
        return "/"
    return f"/{ARCHIVES_DIR}/{page}/"


def pagination_links(page: int, total_pages: int) -> tuple[str | None, str | None]:
    prev_url = page_link(page - 1) if page > 1 else None
    next_url = page_link(page + 1) if page < total_pages else None
    return prev_url, next_url


def page_output_path(output_dir: Path, page: int) -> Path:
    if page == 1:
        return output_dir / "index.html"
    return output_dir / ARCHIVES_DIR / str(page) / "index.html"


def build_article_list(articles: list[Article], labels: dict | None = None) -> str:
    labels = labels or DEFAULT_LABELS
    html = ""
    for date, group in group_by_date(articles):
        html += f"""
<div class="date-group">
    <div class="date-header">{date}</div>
    <ul class="article-list">
"""
        for article in group:
            # Link text is the raw title; only the quoted attribute needs escaping.
            html += f"""
        <li class="article-item">
            <a href="/{article.path}" target="_blank" class="article-link">{article.title}</a>
            <button class="copy-btn" data-title="{escape_attr(article.title)}" data-path="{article.path}">{labels["copy"]}</button>
        </li>
"""
        html += """    </ul>
</div>
"""
    return html


def build_pagination(page: int, total_pages: int, labels: dict | None = None) -> str:
    labels = labels or DEFAULT_LABELS
    prev_url, next_url = pagination_links(page, total_pages)
    items = ['<div class="pagination">']
    if prev_url:
        items.append(f'<a href="{prev_url}" class="pagination-link">{labels["prev"]}</a>')
    current = labels["page"].format(page=page, total=total_pages)
    items.append(f'<span class="pagination-current">{current}</span>')
    if next_url:
        items.append(f'<a href="{next_url}" class="pagination-link">{labels["next"]}</a>')
    items.append("</div>")
    return "".join(items)


def build_index(
    template: str,
    output_dir: Path,
    articles: list[Article],
    per_page: int,
    year: str,
    labels: dict | None = None,
) -> int:
    pages = paginate(articles, per_page)
    total_pages = len(pages)
    for page, page_articles in enumerate(pages, start=1):
        html_doc = render_template(
            template,
            archives=build_article_list(page_articles, labels),
            pagination=build_pagination(page, total_pages, labels),
            year=year,
        )
        path = page_output_path(output_dir, page)
        write_text(path, html_doc)
        print(f"Successfully built page {page} to {path}")
    return total_pages
