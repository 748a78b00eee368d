"""Article datastore: the week's published news items for a locale.

``FileArticleStore`` reads YAML snapshots, one file per locale id:

    <data_dir>/articles/<locale_id>.yaml

Each file is a list of ``{headline, body, category_label, published_at, status}``.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol, runtime_checkable

import yaml
from pydantic import ValidationError

from sunday_edition.models import Article

logger = logging.getLogger(__name__)


@runtime_checkable
class ArticleStore(Protocol):
    async def fetch_week_articles(
        self, locale_ids: list[str], since: datetime, limit: int
    ) -> list[Article]:
        """Published articles for any of ``locale_ids`` newer than ``since``, newest first."""
        ...


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class FileArticleStore:
    """ArticleStore backed by per-locale YAML snapshots."""

    def __init__(self, data_dir: Path):
        self.articles_dir = data_dir / "articles"

    def _load_locale(self, locale_id: str) -> list[Article]:
        path = self.articles_dir / f"{locale_id}.yaml"
        if not path.exists():
            logger.debug(f"No article snapshot for {locale_id}: {path}")
            return []

        try:
            with open(path, "r", encoding="utf-8") as f:
                entries = yaml.safe_load(f) or []
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to read article snapshot {path}: {e}")
            return []

        articles: list[Article] = []
        for entry in entries:
            try:
                articles.append(Article.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping malformed article in {path}: {e.error_count()} error(s)")
        return articles

    async def fetch_week_articles(
        self, locale_ids: list[str], since: datetime, limit: int
    ) -> list[Article]:
        since = _as_utc(since)
        articles = [
            article
            for locale_id in locale_ids
            for article in self._load_locale(locale_id)
            if article.status == "published" and _as_utc(article.published_at) > since
        ]
        articles.sort(key=lambda a: _as_utc(a.published_at), reverse=True)
        return articles[:limit]
