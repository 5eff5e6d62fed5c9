"""Pydantic schemas for the OCR service wire format."""


from pydantic import BaseModel, ConfigDict


class OcrRequest(BaseModel):
	"""Request body posted to the OCR endpoint."""
	image: str


class OcrDetection(BaseModel):
	"""A single recognized text region reported by the service."""
	model_config = ConfigDict(strict=True)

	top: float
	bottom: float
	left: float
	right: float
	rate: float
	text: str

	def summary(self) -> str:
		"""Render the console line: text, box as (left,right,top,bottom), confidence."""
		return '"%s" (%.0f,%.0f,%.0f,%.0f) %.1f%%' % (
			self.text,
			self.left,
			self.right,
			self.top,
			self.bottom,
			self.rate * 100,
		)


class OcrResponseResult(BaseModel):
	"""Result envelope nested under the top-level ``result`` key."""
	model_config = ConfigDict(strict=True)

	errcode: int
	height: int
	width: int
	imgpath: str
	ocr_response: list[OcrDetection]


class OcrResponse(BaseModel):
	"""Full API response."""
	model_config = ConfigDict(strict=True)

	result: OcrResponseResult
