"""Command-line interface for the HTTP OCR client."""
from __future__ import annotations

import argparse
import logging

from config import AppConfig, configure_logging, load_config
from providers.http_ocr import recognize
from schemas import OcrResponse


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
	"""Parse command-line arguments."""
	parser = argparse.ArgumentParser(description="Send an image to an OCR HTTP service and print the detected text")
	source = parser.add_mutually_exclusive_group()
	source.add_argument("--image", default=None, help="Path to a local image file")
	source.add_argument("--image-url", dest="image_url", default=None, help="URL of an image to download")
	parser.add_argument("--api-url", dest="api_url", default=None, help="OCR endpoint URL (overrides OCR_API_URL)")
	return parser.parse_args(argv)


def run(args: argparse.Namespace, config: AppConfig) -> OcrResponse:
	"""Execute OCR processing for the provided arguments."""
	api_url = args.api_url or config.api_url
	if args.image or args.image_url:
		image_path, image_url = args.image, args.image_url
	else:
		image_path, image_url = config.image_path, config.image_url

	return recognize(image_path, image_url, api_url)


def main(argv: list[str] | None = None) -> int:
	"""Entry point for the CLI application."""
	config = load_config()
	configure_logging(config.log_level)
	try:
		args = parse_arguments(argv)
		run(args, config)
	except Exception as exc:  # noqa: BLE001
		logging.error("OCR processing failed: %s", exc)
		return 1
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
