"""Estimation CRUD against the record store's REST surface.

The store is PostgREST (Supabase): rows live in the ``estimations`` table,
filters are query parameters, and writes ask for the affected rows back via
``Prefer: return=representation``. HTTP and network failures are translated
into UpstreamTransportError; absent rows into RecordNotFoundError; bodies
that are not valid estimations rows into RecordContractError.
"""

import logging

import httpx
import pydantic

from estimation_hub.errors import (
    RecordContractError,
    RecordNotFoundError,
    UpstreamTransportError,
    ValidationError,
)
from estimation_hub.models.estimation import (
    EstimationCreate,
    EstimationFilter,
    EstimationRecord,
    EstimationUpdate,
)
from estimation_hub.store.client import get_store_client

logger = logging.getLogger(__name__)

TABLE = "/estimations"

SEARCH_COLUMNS = ("fund_name", "items", "ds_estimation", "le_estimation", "qa_estimation")
ESTIMATION_COLUMNS = ("ds_estimation", "le_estimation", "qa_estimation")

_FILTER_COLUMN = {
    EstimationFilter.DS: "ds_estimation",
    EstimationFilter.LE: "le_estimation",
    EstimationFilter.QA: "qa_estimation",
}

_RETURN_ROWS = {"Prefer": "return=representation"}

# Postgres invalid_text_representation, e.g. a malformed uuid in ?id=eq.
_INVALID_TEXT_CODE = "22P02"


def _quote(value: str) -> str:
    """Double-quote a PostgREST filter value so reserved characters are literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_list_params(
    search: str | None = None,
    filter: EstimationFilter = EstimationFilter.ALL,
) -> list[tuple[str, str]]:
    """Build PostgREST query parameters for the estimation list.

    - Always ordered by created_at descending.
    - search: case-insensitive substring match across fund name, items,
      and the three estimations.
    - ds/le/qa: that estimation is neither null nor empty.
    - missing: any of the three estimations is null or empty.
    """
    params: list[tuple[str, str]] = [("select", "*"), ("order", "created_at.desc")]
    groups: list[str] = []

    term = (search or "").strip()
    if term:
        pattern = _quote(f"*{term}*")
        groups.append(
            "or(" + ",".join(f"{column}.ilike.{pattern}" for column in SEARCH_COLUMNS) + ")"
        )

    if filter in _FILTER_COLUMN:
        column = _FILTER_COLUMN[filter]
        params.append((column, "not.is.null"))
        params.append((column, "neq."))
    elif filter == EstimationFilter.MISSING:
        conditions = [f"{column}.is.null" for column in ESTIMATION_COLUMNS]
        conditions += [f"{column}.eq." for column in ESTIMATION_COLUMNS]
        groups.append("or(" + ",".join(conditions) + ")")

    if groups:
        params.append(("and", "(" + ",".join(groups) + ")"))
    return params


async def _request(method: str, path: str, **kwargs) -> httpx.Response:
    """Send a request to the store, translating failures into domain errors."""
    client = await get_store_client()
    try:
        response = await client.request(method, path, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        body = _error_body(exc.response)
        if body.get("code") == _INVALID_TEXT_CODE:
            raise RecordNotFoundError("Estimation not found") from exc
        message = body.get("message") or exc.response.text
        logger.error(
            "Record store returned %d for %s %s: %s",
            exc.response.status_code,
            method,
            path,
            message,
        )
        raise UpstreamTransportError(f"Record store error: {message}") from exc
    except httpx.HTTPError as exc:
        logger.error("Record store request failed: %s %s", method, path, exc_info=True)
        raise UpstreamTransportError(f"Record store request failed: {exc}") from exc
    return response


def _error_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _decode_rows(response: httpx.Response) -> list[EstimationRecord]:
    """Decode a PostgREST row array into records.

    Raises RecordContractError, carrying the raw body, if the response is not
    JSON, not an array, or holds a row that does not fit the estimations schema.
    """
    try:
        rows = response.json()
    except ValueError as exc:
        logger.error("Record store returned a non-JSON body: %s", exc)
        raise RecordContractError(
            f"Record store response is not valid JSON: {exc}", payload=response.text
        ) from exc

    if not isinstance(rows, list):
        raise RecordContractError(
            "Record store response is not a row array", payload=response.text
        )

    try:
        return [EstimationRecord.model_validate(row) for row in rows]
    except pydantic.ValidationError as exc:
        logger.error(
            "Record store row failed schema validation",
            extra={"error_count": exc.error_count()},
        )
        raise RecordContractError(
            f"Record store row does not match the estimations schema: {exc}",
            payload=response.text,
        ) from exc


def _single_row(response: httpx.Response, record_id: str) -> EstimationRecord:
    rows = _decode_rows(response)
    if not rows:
        raise RecordNotFoundError(f"Estimation {record_id} not found")
    return rows[0]


async def list_estimations(
    search: str | None = None,
    filter: EstimationFilter = EstimationFilter.ALL,
) -> list[EstimationRecord]:
    """Return estimations, newest first, optionally searched and filtered."""
    response = await _request("GET", TABLE, params=build_list_params(search, filter))
    return _decode_rows(response)


async def get_estimation(record_id: str) -> EstimationRecord:
    """Return one estimation by id. Raises RecordNotFoundError if absent."""
    response = await _request(
        "GET", TABLE, params=[("select", "*"), ("id", f"eq.{record_id}")]
    )
    return _single_row(response, record_id)


async def create_estimation(data: EstimationCreate) -> EstimationRecord:
    """Insert a new estimation.

    fund_name is required and non-empty; every other field is optional and
    stored as null when absent or empty.
    """
    if not data.fund_name:
        raise ValidationError("Fund name is required")

    response = await _request(
        "POST",
        TABLE,
        json=[data.model_dump()],
        headers=_RETURN_ROWS,
    )
    record = _single_row(response, "new")
    logger.info("Created estimation %s for %s", record.id, record.fund_name)
    return record


async def update_estimation(record_id: str, patch: EstimationUpdate) -> EstimationRecord:
    """Merge only the provided fields into an existing estimation."""
    changes = patch.model_dump(exclude_unset=True)
    if "fund_name" in changes and not changes["fund_name"]:
        raise ValidationError("Fund name is required")
    if not changes:
        return await get_estimation(record_id)

    response = await _request(
        "PATCH",
        TABLE,
        params=[("id", f"eq.{record_id}")],
        json=changes,
        headers=_RETURN_ROWS,
    )
    record = _single_row(response, record_id)
    logger.info("Updated estimation %s (%s)", record_id, ", ".join(sorted(changes)))
    return record


async def delete_estimation(record_id: str) -> None:
    """Delete an estimation by id. Deleting an absent id is not an error."""
    await _request("DELETE", TABLE, params=[("id", f"eq.{record_id}")])
    logger.info("Deleted estimation %s", record_id)
