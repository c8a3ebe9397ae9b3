from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

ASSETS_SUBDIR = "pages"
DATE_PREFIX_RE = re.compile(r"^([0-9]{4}-[0-9]{2}-[0-9]{2})-")
# Only these escapes are decoded; anything else stays literal in the title.
TITLE_ESCAPES = (
    ("%20", " "),
    ("%E2%80%94", "—"),
    ("%EF%BC%9A", "："),
)


@dataclass(frozen=True)
class Article:
    title: str
    date: str
    path: str
    filename: str


def decode_title(raw: str) -> str:
    for escaped, char in TITLE_ESCAPES:
        raw = raw.replace(escaped, char)
    return raw


def parse_article(filename: str) -> Article | None:
    if filename == "index.html" or not filename.endswith(".html"):
        return None
    match = DATE_PREFIX_RE.match(filename)
    if not match:
        return None
    raw_title = filename[match.end() : -len(".html")]
    return Article(
        title=decode_title(raw_title),
        date=match.group(1),
        path=f"{ASSETS_SUBDIR}/{filename}",
        filename=filename,
    )


def sort_articles(articles: list[Article]) -> list[Article]:
    """Newest first; the filename carries the date so a plain string sort is enough."""
    return sorted(articles, key=lambda article: article.filename, reverse=True)


def group_by_date(articles: list[Article]) -> list[tuple[str, list[Article]]]:
    groups: dict[str, list[Article]] = {}
    for article in articles:
        groups.setdefault(article.date, []).append(article)
    return [(date, groups[date]) for date in sorted(groups, reverse=True)]


def load_articles(pages_dir: Path) -> list[Article]:
    articles = []
    for entry in pages_dir.iterdir():
        article = parse_article(entry.name)
        if article is not None:
            articles.append(article)
    return sort_articles(articles)
