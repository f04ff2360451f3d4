"""Fetch affirmations from the sheets-backed HTTP endpoint."""

import logging
from typing import Any

import httpx

from takeout.errors import BackendReportedError, EmptyResult, MalformedResponse, NetworkFailure
from takeout.sources.base import BaseSource

logger = logging.getLogger(__name__)


def extract_column(rows: list[Any], column_index: int = 2) -> list[str]:
    """Pull one column out of a sheet, skipping the header row.

    Rows that are not lists, rows too short to hold the column, and cells that
    are null or blank after trimming are dropped. Kept values are returned
    as received.
    """
    values: list[str] = []
    for row in rows[1:]:
        if not isinstance(row, list) or len(row) <= column_index:
            continue
        cell = row[column_index]
        if cell is None or isinstance(cell, (list, dict)):
            continue
        text = cell if isinstance(cell, str) else str(cell)
        if text.strip():
            values.append(text)
    return values


def parse_payload(payload: Any, column_index: int = 2) -> list[str]:
    """Turn a decoded ``{"data": [[...], ...]}`` body into affirmations."""
    if not isinstance(payload, dict):
        raise MalformedResponse(f"Expected a JSON object, got {type(payload).__name__}")
    if payload.get("error"):
        raise BackendReportedError(str(payload["error"]))

    rows = payload.get("data")
    if not isinstance(rows, list):
        raise MalformedResponse("Response has no 'data' table")

    affirmations = extract_column(rows, column_index)
    if not affirmations:
        raise EmptyResult(f"No affirmations in column {column_index} ({len(rows)} rows)")
    return affirmations


class RemoteSource(BaseSource):
    """Single GET against the configured endpoint. No retries."""

    name = "remote"

    def __init__(
        self,
        endpoint: str,
        timeout: float = 10.0,
        column_index: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.column_index = column_index
        self._transport = transport

    async def fetch(self) -> list[str]:
        logger.debug("GET %s", self.endpoint)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport,
            ) as client:
                response = await client.get(self.endpoint)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkFailure(f"Request to {self.endpoint} failed: {e}") from e

        if not response.is_success:
            raise NetworkFailure(f"HTTP error! status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse(f"Response is not JSON: {e}") from e

        affirmations = parse_payload(payload, self.column_index)
        logger.info("Fetched %d affirmations from %s", len(affirmations), self.endpoint)
        return affirmations
