"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sunday_edition.llm_providers import GeminiModel, GrokModel
from sunday_edition.models import Locale

logger = logging.getLogger(__name__)


class PipelineConfig(BaseModel):
    """Per-locale brief generation parameters."""

    lookback_days: int = 7
    article_limit: int = 50
    max_stories: int = Field(default=3, ge=0, le=3)
    max_events: int = Field(default=3, ge=0, le=3)
    holiday_window_days: int = 7
    # Completion calls issued at once for one locale; 1 keeps the stages strictly sequential
    max_concurrent_llm_calls: int = Field(default=1, ge=1)
    call_timeout_seconds: float = 120.0
    headline_match_chars: int = 30  # Leading chars compared when matching stories to articles
    source_excerpt_chars: int = 500  # Article body chars handed to synthesis


class ModelsConfig(BaseModel):
    """Model names per tier."""

    pro: str = GeminiModel.GEMINI_3_PRO.value
    flash: str = GeminiModel.GEMINI_3_FLASH.value
    grok: str = GrokModel.GROK_4_1_FAST.value


class BatchConfig(BaseModel):
    """Cross-locale batch parameters."""

    concurrency: int = Field(default=5, ge=1)  # Locales processed at once
    pro_daily_budget: int = 1000  # Pro model requests per day
    calls_per_locale: int = 5  # Completion calls one locale consumes


class SchedulerConfig(BaseModel):
    """Weekly batch schedule (cron fields, UTC)."""

    day_of_week: str = "sun"
    hour: int = 4
    minute: int = 0
    timezone: str = "UTC"


class Settings(BaseSettings):
    """Main configuration class."""

    # Paths
    data_dir: Path = Path("data")

    # API Keys
    gemini_api_key: str = ""
    grok_api_key: str = Field(
        default="", validation_alias=AliasChoices("grok_api_key", "xai_api_key")
    )
    logfire_token: str = ""

    # Nested configuration sections
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)

    locales: list[Locale] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("data_dir", mode="after")
    @classmethod
    def resolve_data_dir(cls, v: Path) -> Path:
        """Resolve data directory to absolute path."""
        return v.resolve()

    def get_locale(self, locale_id: str) -> Locale | None:
        """Find a configured locale by id."""
        for locale in self.locales:
            if locale.id == locale_id:
                return locale
        return None

    def load_yaml_config(self) -> None:
        """Load and merge YAML configuration."""
        config_path = self.data_dir / "config.yaml"

        if not config_path.exists():
            logger.warning(
                f"Config file not found: {config_path}. "
                "Using defaults. Run 'python -m sunday_edition init' to create it."
            )
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            for section_name in ["pipeline", "models", "batch", "scheduler"]:
                if section_name in yaml_config:
                    section = getattr(self, section_name)
                    yaml_section = yaml_config[section_name] or {}

                    section_dict = section.model_dump()
                    section_dict.update(yaml_section)

                    new_section = section.__class__(**section_dict)
                    setattr(self, section_name, new_section)

            if yaml_config.get("locales"):
                self.locales = [Locale(**entry) for entry in yaml_config["locales"]]

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
