#!/usr/bin/env python3
"""
Configuration loading and management for bo-field-mapper.

Handles loading configuration from config.yaml and merging with CLI arguments.
CLI arguments take precedence over config.yaml values.
"""

from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .logging_config import get_logger
from .matcher import MatcherConfig
from .schema import ValidationError, validate_config

logger = get_logger(__name__)


class Config:
    """Configuration management class for bo-field-mapper."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration with defaults and load from file if available."""
        self.match_threshold = 0.6
        self.boost_increment = 0.3
        self.exact_match_on_code = True
        self.synonyms: Dict[str, List[str]] = {}
        self.log_level = "INFO"

        explicit = config_path is not None
        if config_path is None:
            config_path = Path.cwd() / "config" / "config.yaml"
            if not config_path.exists():
                config_path = Path.cwd() / "configs" / "config.yaml"
                if not config_path.exists():
                    config_path = Path.cwd() / "config.yaml"

        self.config_path = Path(config_path)
        if self.config_path.exists():
            self._load_from_file(self.config_path)
        elif explicit:
            logger.warning(f"Config file not found: {self.config_path}, using defaults")

    def _load_from_file(self, config_path: Path) -> None:
        """Load configuration from YAML file."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not load {config_path}: {e}")
            logger.info("Using default values")
            return

        if not config_data:
            return

        try:
            validated = validate_config(config_data)
        except ValidationError as e:
            logger.warning(f"Ignoring {config_path}: {e}")
            logger.info("Using default values")
            return

        self.match_threshold = validated.match_threshold
        self.boost_increment = validated.boost_increment
        self.exact_match_on_code = validated.exact_match_on_code
        self.synonyms = dict(validated.synonyms or {})
        self.log_level = validated.log_level

    def merge_with_cli_args(self, args) -> None:
        """
        Merge CLI arguments with config values. CLI args take precedence.

        Raises:
            ValidationError: If an override is outside the config.yaml bounds
        """
        overrides = {}
        if getattr(args, "threshold", None) is not None:
            overrides["match_threshold"] = args.threshold
        if getattr(args, "boost_increment", None) is not None:
            overrides["boost_increment"] = args.boost_increment
        if overrides:
            validate_config(overrides)
            for key, value in overrides.items():
                setattr(self, key, value)
        if getattr(args, "no_code_match", False):
            self.exact_match_on_code = False
        if getattr(args, "log_level", None) is not None:
            self.log_level = args.log_level.upper()

    def build_matcher_config(self) -> MatcherConfig:
        """Matcher settings derived from this configuration."""
        return MatcherConfig(
            threshold=self.match_threshold,
            boost_increment=self.boost_increment,
            exact_match_on_code=self.exact_match_on_code,
            extra_synonyms=self.synonyms or None,
        )


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or use defaults."""
    return Config(config_path)
