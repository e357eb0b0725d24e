import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import colorlog
from dotenv import load_dotenv

from resource_docgen.exceptions import ConfigurationError
from resource_docgen.logging_config import json_formatter

# Load environment variables
load_dotenv()

"""
Configuration Management for Resource Doc Generator

This module provides centralized configuration management with validation
and environment variable handling.
"""

logger = logging.getLogger(__name__)

DEFAULT_EDIT_URL_TEMPLATE = (
    "https://github.com/chef/chef-web-docs/blob/master/chef_master/source/"
    "resource_{name}.rst"
)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    format: str = field(
        default_factory=lambda: os.getenv(
            "LOG_FORMAT", "%(log_color)s%(levelname)s:%(name)s:%(message)s"
        )
    )
    file_output: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE"))
    json_output: bool = field(default_factory=lambda: _env_flag("LOG_JSON"))

    def __post_init__(self) -> None:
        """Validate logging configuration."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise ConfigurationError(
                f"Log level must be one of: {valid_levels}", config_key="LOG_LEVEL"
            )
        self.level = self.level.upper()

    def get_log_level(self) -> int:
        """Convert string log level to logging constant."""
        level_attr = getattr(logging, self.level, None)
        if level_attr is None:
            raise ConfigurationError(
                f"Invalid log level: {self.level}", config_key="LOG_LEVEL"
            )
        return int(level_attr)


@dataclass
class DocumentationConfig:
    """Configuration for reference page generation."""

    output_directory: str = field(
        default_factory=lambda: os.getenv("DOCGEN_OUTPUT_DIR", ".")
    )
    file_extension: str = field(
        default_factory=lambda: os.getenv("DOCGEN_FILE_EXTENSION", ".rst")
    )
    edit_url_template: str = field(
        default_factory=lambda: os.getenv(
            "DOCGEN_EDIT_URL_TEMPLATE", DEFAULT_EDIT_URL_TEMPLATE
        )
    )
    product_name: str = field(
        default_factory=lambda: os.getenv("DOCGEN_PRODUCT_NAME", "Chef Client")
    )
    type_label: str = field(
        default_factory=lambda: os.getenv("DOCGEN_TYPE_LABEL", "Ruby Type")
    )

    def __post_init__(self) -> None:
        """Validate documentation configuration."""
        if not self.output_directory:
            raise ConfigurationError(
                "Output directory is required", config_key="DOCGEN_OUTPUT_DIR"
            )
        if not self.file_extension.startswith("."):
            raise ConfigurationError(
                "File extension must start with '.'", config_key="DOCGEN_FILE_EXTENSION"
            )
        if "{name}" not in self.edit_url_template:
            raise ConfigurationError(
                "Edit URL template must contain a {name} placeholder",
                config_key="DOCGEN_EDIT_URL_TEMPLATE",
            )

    def edit_url(self, name: str) -> str:
        """Source link for a resource page."""
        return self.edit_url_template.format(name=name)


@dataclass
class DocGenConfig:
    """Main configuration class that aggregates all configuration sections."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    documentation: DocumentationConfig = field(default_factory=DocumentationConfig)

    @classmethod
    def from_environment(
        cls,
        output_directory: Optional[str] = None,
        log_level: Optional[str] = None,
        json_logs: Optional[bool] = None,
    ) -> "DocGenConfig":
        """
        Create configuration from environment variables.

        Args:
            output_directory: Optional override for DOCGEN_OUTPUT_DIR
            log_level: Optional override for LOG_LEVEL
            json_logs: Optional override for LOG_JSON

        Returns:
            DocGenConfig: Configured instance
        """
        config = cls()
        if output_directory is not None:
            config.documentation.output_directory = output_directory
        if log_level is not None:
            config.logging.level = log_level
        if json_logs is not None:
            config.logging.json_output = json_logs
        return config

    def validate_all(self) -> None:
        """Validate all configuration sections."""
        try:
            self.logging.__post_init__()
            self.documentation.__post_init__()
            logger.debug("Configuration validation successful")
        except ConfigurationError as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

    def log_configuration_summary(self) -> None:
        """Log a summary of the current configuration."""
        logger.debug("=" * 60)
        logger.debug("RESOURCE DOC GENERATOR CONFIGURATION")
        logger.debug("=" * 60)
        logger.debug(f"Output Directory: {self.documentation.output_directory}")
        logger.debug(f"File Extension: {self.documentation.file_extension}")
        logger.debug(f"Edit URL Template: {self.documentation.edit_url_template}")
        logger.debug(f"Product Name: {self.documentation.product_name}")
        logger.debug(f"Logging Level: {self.logging.level}")
        if self.logging.file_output:
            logger.debug(f"Log File: {self.logging.file_output}")
        logger.debug("=" * 60)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            "logging": {
                "level": self.logging.level,
                "file_output": self.logging.file_output,
                "json_output": self.logging.json_output,
            },
            "documentation": {
                "output_directory": self.documentation.output_directory,
                "file_extension": self.documentation.file_extension,
                "edit_url_template": self.documentation.edit_url_template,
                "product_name": self.documentation.product_name,
                "type_label": self.documentation.type_label,
            },
        }


def setup_logging(config: LoggingConfig) -> None:
    """
    Setup logging configuration based on config.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(config.get_log_level())

    if config.json_output:
        console_handler: logging.Handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(json_formatter())
    else:
        console_handler = colorlog.StreamHandler(sys.stderr)
        console_handler.setFormatter(colorlog.ColoredFormatter(config.format))
    root_logger.addHandler(console_handler)

    if config.file_output:
        file_handler = logging.FileHandler(config.file_output, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s:%(name)s:%(message)s")
        )
        root_logger.addHandler(file_handler)

    logger.debug(
        f"Logging configured: level={config.level}, file={config.file_output or 'console'}"
    )


def create_config_from_env(
    output_directory: Optional[str] = None,
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> DocGenConfig:
    """
    Factory function to create and validate configuration from environment.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config = DocGenConfig.from_environment(output_directory, log_level, json_logs)
    config.validate_all()
    return config
