"""Application configuration management for the OCR client."""


import logging
import os
from dataclasses import dataclass
from typing import Final

from dotenv import load_dotenv

ENV_FILE: Final[str] = ".env"
DEFAULT_API_URL: Final[str] = "http://192.168.31.106:5000/ocr"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True)
class AppConfig:
	"""Aggregate configuration for the CLI runtime."""
	api_url: str = DEFAULT_API_URL
	image_path: str = ""
	image_url: str = ""
	log_level: int = DEFAULT_LOG_LEVEL


def load_config() -> AppConfig:
	"""Load environment-based configuration values.

	Returns:
		AppConfig: Endpoint and default image source, falling back to built-in defaults.
	"""
	load_dotenv(ENV_FILE)
	return AppConfig(
		api_url=os.getenv("OCR_API_URL") or DEFAULT_API_URL,
		image_path=os.getenv("OCR_IMAGE_PATH", ""),
		image_url=os.getenv("OCR_IMAGE_URL", ""),
		log_level=_parse_log_level(os.getenv("OCR_LOG_LEVEL", "")),
	)


def configure_logging(level: int = DEFAULT_LOG_LEVEL) -> None:
	"""Configure the root logger for the application."""
	logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def _parse_log_level(value: str) -> int:
	"""Translate a level name such as ``DEBUG`` into a logging constant."""
	level = logging.getLevelName(value.strip().upper()) if value else DEFAULT_LOG_LEVEL
	return level if isinstance(level, int) else DEFAULT_LOG_LEVEL
