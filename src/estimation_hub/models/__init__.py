"""Data models for the Estimation Hub pipeline."""

from estimation_hub.models.estimation import (
    EstimationCreate,
    EstimationFilter,
    EstimationRecord,
    EstimationUpdate,
)
from estimation_hub.models.extraction import (
    EXTRACTION_FIELDS,
    ConfidenceLevel,
    ExtractedField,
    ExtractionRequest,
    ExtractionResponse,
    ExtractionResult,
)
from estimation_hub.models.slack import ThreadMessage, ThreadReference

__all__ = [
    "ThreadMessage",
    "ThreadReference",
    "EXTRACTION_FIELDS",
    "ConfidenceLevel",
    "ExtractedField",
    "ExtractionRequest",
    "ExtractionResponse",
    "ExtractionResult",
    "EstimationCreate",
    "EstimationFilter",
    "EstimationRecord",
    "EstimationUpdate",
]
