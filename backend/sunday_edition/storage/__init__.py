"""Article snapshots in, generated editions out."""

from .articles import ArticleStore, FileArticleStore
from .briefs import brief_exists, get_brief_path, load_brief, save_brief

__all__ = [
    "ArticleStore",
    "FileArticleStore",
    "brief_exists",
    "get_brief_path",
    "load_brief",
    "save_brief",
]
