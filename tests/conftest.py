"""Shared fixtures: a minimal stand-in for ``requests.Session``."""
from __future__ import annotations

import json
from typing import Any

import pytest


class FakeResponse:
	"""Just enough of ``requests.Response`` for the client code paths."""

	def __init__(self, body: bytes = b"", status_code: int = 200, error: Exception | None = None) -> None:
		self._body = body
		self._error = error
		self.status_code = status_code
		self.closed = False

	@property
	def ok(self) -> bool:
		return self.status_code < 400

	@property
	def content(self) -> bytes:
		if self._error is not None:
			raise self._error
		return self._body

	def __enter__(self) -> "FakeResponse":
		return self

	def __exit__(self, *exc_info: Any) -> None:
		self.closed = True


class FakeSession:
	"""Records requests and replays queued responses or errors."""

	def __init__(self) -> None:
		self.calls: list[dict[str, Any]] = []
		self.get_result: FakeResponse | Exception = FakeResponse(b"")
		self.post_result: FakeResponse | Exception = FakeResponse(b"")
		self.closed = False

	def __enter__(self) -> "FakeSession":
		return self

	def __exit__(self, *exc_info: Any) -> None:
		self.closed = True

	def get(self, url: str, **kwargs: Any) -> FakeResponse:
		self.calls.append({"method": "GET", "url": url, **kwargs})
		return self._reply(self.get_result)

	def post(self, url: str, **kwargs: Any) -> FakeResponse:
		self.calls.append({"method": "POST", "url": url, **kwargs})
		return self._reply(self.post_result)

	@staticmethod
	def _reply(result: FakeResponse | Exception) -> FakeResponse:
		if isinstance(result, Exception):
			raise result
		return result


SAMPLE_RESPONSE: dict[str, Any] = {
	"result": {
		"errcode": 0,
		"height": 480,
		"width": 640,
		"imgpath": "temp/upload.png",
		"ocr_response": [
			{"text": "A", "left": 1, "right": 2, "top": 3, "bottom": 4, "rate": 0.91},
			{"text": "B", "left": 5, "right": 6, "top": 7, "bottom": 8, "rate": 0.5},
		],
	}
}


@pytest.fixture
def fake_session() -> FakeSession:
	return FakeSession()


@pytest.fixture
def sample_body() -> bytes:
	return json.dumps(SAMPLE_RESPONSE).encode("utf-8")
