"""HTTP OCR provider: posts base64 images as JSON and parses the boxed text results."""


import logging
from dataclasses import dataclass, field
from pathlib import Path

import requests
from pydantic import ValidationError

from errors import DecodeError, EncodeError, InvalidArgumentError, NetworkError, OcrIOError
from schemas import OcrRequest, OcrResponse
from utils.image_io import download_image, encode_base64, read_image_bytes

JSON_HEADERS: dict[str, str] = {"Content-Type": "application/json"}


@dataclass
class HttpOcrClient:
	"""Client wrapper around a JSON OCR endpoint."""

	api_url: str
	session: requests.Session = field(default_factory=requests.Session)

	def __post_init__(self) -> None:
		self._logger = logging.getLogger(self.__class__.__name__)

	def recognize(self, image_path: str | Path | None = None, image_url: str | None = None) -> OcrResponse:
		if image_path:
			image_bytes = read_image_bytes(image_path)
		elif image_url:
			image_bytes = download_image(image_url, self.session)
		else:
			raise InvalidArgumentError("Provide either image_path or image_url.")
		self._logger.info("Loaded %d image bytes from %s", len(image_bytes), image_path or image_url)
		return self.recognize_base64(encode_base64(image_bytes))

	def recognize_base64(self, base64_image: str) -> OcrResponse:
		payload = self._build_payload(base64_image)
		body = self._post(payload)
		response = self._parse_response(body)
		self._print_detections(response)
		return response

	def _build_payload(self, base64_image: str) -> str:
		try:
			return OcrRequest(image=base64_image).model_dump_json()
		except (ValidationError, TypeError, ValueError) as exc:
			raise EncodeError(f"Failed to encode OCR request: {exc}") from exc

	def _post(self, payload: str) -> bytes:
		self._logger.info("Posting %d byte payload to %s", len(payload), self.api_url)
		try:
			response = self.session.post(self.api_url, data=payload.encode("utf-8"), headers=JSON_HEADERS, stream=True)
		except requests.RequestException as exc:
			raise NetworkError(f"OCR API request to {self.api_url} failed: {exc}") from exc

		with response:
			if not response.ok:
				self._logger.warning("OCR API returned HTTP %s", response.status_code)
			try:
				return response.content
			except (requests.RequestException, OSError) as exc:
				raise OcrIOError(f"Failed to read OCR API response: {exc}") from exc

	def _parse_response(self, body: bytes) -> OcrResponse:
		try:
			return OcrResponse.model_validate_json(body)
		except ValidationError as exc:
			raise DecodeError(f"Failed to parse OCR response JSON: {exc}") from exc

	def _print_detections(self, response: OcrResponse) -> None:
		detections = response.result.ocr_response
		self._logger.info("Service returned errcode=%s with %d detections", response.result.errcode, len(detections))
		print("OCR results:")
		for detection in detections:
			print(detection.summary())


def recognize(image_path: str | Path | None, image_url: str | None, api_url: str) -> OcrResponse:
	"""Recognize text in a local or remote image using the endpoint at ``api_url``."""
	with requests.Session() as session:
		return HttpOcrClient(api_url, session=session).recognize(image_path=image_path, image_url=image_url)


def recognize_base64(base64_image: str, api_url: str) -> OcrResponse:
	"""Recognize text in an already base64-encoded image."""
	with requests.Session() as session:
		return HttpOcrClient(api_url, session=session).recognize_base64(base64_image)
