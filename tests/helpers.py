from __future__ import annotations

TEMPLATE = (
    "<html><body>\n"
    "<!-- ARCHIVES_PLACEHOLDER -->\n"
    "<!-- PAGINATION_PLACEHOLDER -->\n"
    "<footer><!-- YEAR_PLACEHOLDER --></footer>\n"
    "</body></html>\n"
)


def make_article_names(count: int) -> list[str]:
    """Distinct article filenames, spread across a few days."""
    return [f"2024-01-{(i % 28) + 1:02d}-Post%20{i:03d}.html" for i in range(count)]
