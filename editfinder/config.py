"""Configuration models using simple dataclasses."""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

import yaml

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("innertube", "yt_dlp")


@dataclass
class SearchConfig:
    """Search provider selection and classification thresholds."""

    provider: str = "innertube"
    max_results: int = 30
    max_short_seconds: int = 90
    tutorial_suffix: str = "editing tutorial"
    shorts_suffix: str = "vertical video"
    tutorial_keywords: List[str] = field(default_factory=lambda: ["edit", "tutorial"])
    region: str = "US"
    language: str = "en"


@dataclass
class ScrapingConfig:
    """HTTP settings for talking to YouTube."""

    timeout_seconds: int = 15

    user_agents: List[str] = field(
        default_factory=lambda: [
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
            "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        ]
    )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file_path: str = "editfinder.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    console_output: bool = True


@dataclass
class ApiConfig:
    """HTTP API server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class DiscoveryConfig:
    """Main configuration model."""

    search: SearchConfig = field(default_factory=SearchConfig)
    scraping: ScrapingConfig = field(default_factory=ScrapingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    api: ApiConfig = field(default_factory=ApiConfig)


def _filter_fields(data: Dict[str, Any], cls: Type[Any]) -> Dict[str, Any]:
    """Return only keys present on the dataclass to avoid TypeErrors."""
    valid_fields = cls.__dataclass_fields__.keys()
    return {k: v for k, v in data.items() if k in valid_fields}


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Configuration section '{name}' must be a mapping")
    return section


def validate_config(cfg: DiscoveryConfig) -> None:
    """Validation with bounds checking."""
    if cfg.search.provider not in SUPPORTED_PROVIDERS:
        raise ValueError(f"search.provider must be one of: {list(SUPPORTED_PROVIDERS)}")
    if not (1 <= cfg.search.max_results <= 100):
        raise ValueError("search.max_results must be between 1 and 100")
    if not (1 <= cfg.search.max_short_seconds <= 600):
        raise ValueError("search.max_short_seconds must be between 1 and 600")
    if not cfg.search.tutorial_suffix.strip():
        raise ValueError("search.tutorial_suffix cannot be empty")
    if not cfg.search.shorts_suffix.strip():
        raise ValueError("search.shorts_suffix cannot be empty")
    keywords = cfg.search.tutorial_keywords
    if not isinstance(keywords, list) or not keywords:
        raise ValueError("search.tutorial_keywords must be a non-empty list of strings")
    if not all(isinstance(keyword, str) and keyword.strip() for keyword in keywords):
        raise ValueError("search.tutorial_keywords entries must be non-empty strings")
    cfg.search.tutorial_keywords = [keyword.strip().lower() for keyword in keywords]

    if not (1 <= cfg.scraping.timeout_seconds <= 300):
        raise ValueError("scraping.timeout_seconds must be between 1 and 300")
    if not cfg.scraping.user_agents:
        raise ValueError("scraping.user_agents must contain at least one entry")

    if not (1 <= cfg.logging.max_file_size_mb <= 1000):
        raise ValueError("max_file_size_mb must be between 1 and 1000 MB")
    if not (0 <= cfg.logging.backup_count <= 100):
        raise ValueError("backup_count must be between 0 and 100")

    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if cfg.logging.level.upper() not in valid_levels:
        raise ValueError(f"logging.level must be one of: {valid_levels}")

    if not (1 <= cfg.api.port <= 65535):
        raise ValueError("api.port must be between 1 and 65535")


def load_config(config_path: Optional[str] = None) -> DiscoveryConfig:
    """Load configuration from YAML file or return defaults."""
    if config_path and Path(config_path).exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)

            if config_data is None:
                logger.warning(f"Configuration file {config_path} is empty, using defaults")
                config_data = {}
            elif not isinstance(config_data, dict):
                raise ValueError(
                    f"Configuration file must contain a dictionary, got {type(config_data).__name__}"
                )

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file {config_path}: {e}")
        except (IOError, OSError) as e:
            raise ValueError(f"Cannot read configuration file {config_path}: {e}")

        try:
            cfg = DiscoveryConfig(
                search=SearchConfig(**_filter_fields(_section(config_data, "search"), SearchConfig)),
                scraping=ScrapingConfig(
                    **_filter_fields(_section(config_data, "scraping"), ScrapingConfig)
                ),
                logging=LoggingConfig(
                    **_filter_fields(_section(config_data, "logging"), LoggingConfig)
                ),
                api=ApiConfig(**_filter_fields(_section(config_data, "api"), ApiConfig)),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid configuration values in {config_path}: {e}")

        try:
            validate_config(cfg)
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Invalid configuration values in {config_path}: {e}")
        return cfg

    cfg = DiscoveryConfig()
    validate_config(cfg)
    return cfg


def save_config_template(output_path: str = "config_template.yaml") -> str:
    """Save a template configuration file."""
    config_dict = asdict(DiscoveryConfig())

    with open(output_path, "w", encoding="utf-8") as f:
        yaml.dump(config_dict, f, default_flow_style=False, indent=2)

    logger.info(f"Configuration template saved to: {output_path}")
    return output_path
