"""AI extraction result models and the /api/extract request/response shapes."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

EXTRACTION_FIELDS = (
    "fund_name",
    "items",
    "ds_estimation",
    "le_estimation",
    "qa_estimation",
    "clickup_link",
)


class ConfidenceLevel(str, Enum):
    """Review bands for a confidence score."""

    HIGH = "high"  # >= 0.8
    MEDIUM = "medium"  # 0.5 - 0.79
    LOW = "low"  # < 0.5


class ExtractedField(BaseModel):
    """One extracted value with the model's confidence in it."""

    model_config = ConfigDict(frozen=True)

    value: str | None
    confidence: float = Field(ge=0.0, le=1.0)

    @property
    def level(self) -> ConfidenceLevel:
        if self.confidence >= 0.8:
            return ConfidenceLevel.HIGH
        if self.confidence >= 0.5:
            return ConfidenceLevel.MEDIUM
        return ConfidenceLevel.LOW


class ExtractionResult(BaseModel):
    """The six-field extraction contract. All fields are required."""

    model_config = ConfigDict(frozen=True)

    fund_name: ExtractedField
    items: ExtractedField
    ds_estimation: ExtractedField
    le_estimation: ExtractedField
    qa_estimation: ExtractedField
    clickup_link: ExtractedField

    def low_confidence_fields(self, threshold: float = 0.5) -> list[str]:
        """Names of fields whose confidence is below ``threshold``, in contract order."""
        return [
            name
            for name in EXTRACTION_FIELDS
            if getattr(self, name).confidence < threshold
        ]


class ExtractionRequest(BaseModel):
    """Body of POST /api/extract. A non-empty permalink wins over thread_text."""

    thread_text: str | None = None
    permalink: str | None = None


class ExtractionResponse(ExtractionResult):
    """Extraction result plus the echoed source link."""

    slack_link: str | None = None
