"""Estimation record models mirroring the `estimations` table."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, field_validator

OPTIONAL_TEXT_FIELDS = (
    "items",
    "ds_estimation",
    "le_estimation",
    "qa_estimation",
    "slack_link",
    "clickup_link",
    "raw_thread",
)


class EstimationFilter(str, Enum):
    """Categorical filters for the estimation list."""

    ALL = "all"
    DS = "ds"
    LE = "le"
    QA = "qa"
    MISSING = "missing"


class EstimationRecord(BaseModel):
    """A stored estimation row. Absent values are None, never empty strings."""

    id: str
    fund_name: str
    items: str | None = None
    ds_estimation: str | None = None
    le_estimation: str | None = None
    qa_estimation: str | None = None
    slack_link: str | None = None
    clickup_link: str | None = None
    raw_thread: str | None = None
    created_at: datetime
    updated_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value


class _EstimationFields(BaseModel):
    """Editable columns. Empty strings are coalesced to None at this boundary."""

    fund_name: str | None = None
    items: str | None = None
    ds_estimation: str | None = None
    le_estimation: str | None = None
    qa_estimation: str | None = None
    slack_link: str | None = None
    clickup_link: str | None = None
    raw_thread: str | None = None

    @field_validator("fund_name")
    @classmethod
    def _strip_fund_name(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else None

    @field_validator(*OPTIONAL_TEXT_FIELDS)
    @classmethod
    def _empty_to_none(cls, value: str | None) -> str | None:
        return value or None


class EstimationCreate(_EstimationFields):
    """Body of POST /api/estimations. fund_name is checked by the store service."""


class EstimationUpdate(_EstimationFields):
    """Body of PATCH /api/estimations/{id}. Only fields present in the body are merged."""
