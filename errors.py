"""Exception hierarchy for the OCR client."""


class OcrError(Exception):
	"""Base class for every failure raised while running an OCR request."""


class InvalidArgumentError(OcrError, ValueError):
	"""Neither an image path nor an image URL was supplied."""


class OcrIOError(OcrError, OSError):
	"""Reading the local image or the API response body failed."""


class NetworkError(OcrError):
	"""An HTTP request could not be completed."""


class EncodeError(OcrError):
	"""The request payload could not be serialized."""


class DecodeError(OcrError):
	"""The API response did not match the expected JSON shape."""
