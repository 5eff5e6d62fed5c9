"""Utility helpers for loading input images and encoding them for HTTP payloads."""

import base64
import binascii
import logging
from pathlib import Path

import requests

from errors import NetworkError, OcrIOError

logger = logging.getLogger(__name__)


def read_image_bytes(path: str | Path) -> bytes:
	"""Read the raw bytes of a local image."""
	image_path = Path(path).expanduser()
	try:
		return image_path.read_bytes()
	except (OSError, ValueError) as exc:
		raise OcrIOError(f"Failed to read local image {image_path}: {exc}") from exc


def download_image(url: str, session: requests.Session) -> bytes:
	"""Fetch an image over HTTP and return the full body."""
	logger.debug("Downloading image from %s", url)
	try:
		with session.get(url, stream=True) as response:
			if not response.ok:
				logger.warning("Image download returned HTTP %s for %s", response.status_code, url)
			return response.content
	except requests.RequestException as exc:
		raise NetworkError(f"Failed to download image from {url}: {exc}") from exc


def encode_base64(data: bytes) -> str:
	"""Encode image bytes as standard padded base64 text."""
	return base64.b64encode(data).decode("ascii")


def decode_base64(text: str) -> bytes:
	"""Decode base64 text produced by :func:`encode_base64`."""
	try:
		return base64.b64decode(text, validate=True)
	except (binascii.Error, ValueError) as exc:
		raise ValueError(f"Invalid base64 image data: {exc}") from exc
