"""Persistence of generated editions as Markdown with YAML frontmatter.

One file per locale per edition week:

    <data_dir>/briefs/<week_date>/<locale_id>.md

The frontmatter carries the structured brief (camelCase keys); the body is
the formatted article text ready for publishing.
"""

import logging
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import yaml

from sunday_edition.formatter import format_weekly_brief_as_article
from sunday_edition.models import Locale, WeeklyBriefContent

logger = logging.getLogger(__name__)


def get_brief_path(data_dir: Path, locale_id: str, week_date: str) -> Path:
    return data_dir / "briefs" / week_date / f"{locale_id}.md"


def brief_exists(data_dir: Path, locale_id: str, week_date: str) -> bool:
    """Whether this locale already has an edition for the week."""
    return get_brief_path(data_dir, locale_id, week_date).exists()


def _format_markdown_with_frontmatter(frontmatter_data: dict, body: str) -> str:
    frontmatter = yaml.dump(
        frontmatter_data,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )
    return f"---\n{frontmatter}---\n\n{body}\n"


def save_brief(
    data_dir: Path,
    locale: Locale,
    week_date: str,
    content: WeeklyBriefContent,
    model_name: str | None = None,
) -> Path:
    """Write the edition atomically (tempfile -> rename) and return its path."""
    file_path = get_brief_path(data_dir, locale.id, week_date)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    frontmatter = {
        "locale_id": locale.id,
        "locale_name": locale.name,
        "city": locale.city,
        "country": locale.country,
        "week_date": week_date,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "model": model_name,
        "brief": content.model_dump(mode="json", by_alias=True),
    }
    markdown = _format_markdown_with_frontmatter(
        frontmatter, format_weekly_brief_as_article(content)
    )

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=file_path.parent,
            delete=False,
            suffix=".md",
            encoding="utf-8",
        ) as temp_file:
            temp_file.write(markdown)
            temp_path = Path(temp_file.name)

        shutil.move(str(temp_path), str(file_path))
        logger.info(f"Saved brief: {file_path}")
        return file_path

    except Exception as e:
        logger.error(f"Failed to save brief {file_path}: {e}")
        if temp_path and temp_path.exists():
            temp_path.unlink()
        raise


def load_brief(file_path: Path) -> WeeklyBriefContent:
    """Read the structured brief back from a saved edition."""
    content = file_path.read_text(encoding="utf-8")
    if not content.startswith("---\n"):
        raise ValueError(f"Invalid frontmatter in {file_path}")

    # Only a line holding exactly --- closes the frontmatter
    parts = content[len("---\n"):].split("\n---\n", 1)
    if len(parts) < 2:
        raise ValueError(f"Could not parse frontmatter in {file_path}")

    frontmatter = yaml.safe_load(parts[0]) or {}
    return WeeklyBriefContent.model_validate(frontmatter["brief"])
