"""Control-point input: JSON records → Nx3 array.

Records are objects with optional numeric x/y/z; anything missing or
non-numeric becomes 0. Fetch failures are reported as PointsFetchError and
the analysis is never run on them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx
import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 10.0


class PointsFetchError(RuntimeError):
    """Control points could not be loaded from a URL."""


def _coordinate(record: Mapping[str, Any], key: str) -> float:
    value = record.get(key)
    # bool is an int subclass but not a coordinate
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def parse_point_records(records: Any) -> NDArray[np.float64]:
    """Convert a list of {x, y, z} records into an Nx3 array."""
    if not isinstance(records, list):
        raise ValueError(f"expected a JSON array of points, got {type(records).__name__}")

    rows: list[tuple[float, float, float]] = []
    skipped = 0
    for record in records:
        if not isinstance(record, Mapping):
            skipped += 1
            continue
        rows.append((_coordinate(record, "x"), _coordinate(record, "y"), _coordinate(record, "z")))

    if skipped:
        logger.warning("Skipped %d point records that were not objects", skipped)
    return np.array(rows, dtype=np.float64).reshape(-1, 3)


def fetch_points_from_json(
    url: str,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    client: httpx.Client | None = None,
) -> NDArray[np.float64]:
    """GET ``url`` and parse its JSON body as point records."""
    owns_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = http.get(url)
        if response.is_error:
            raise PointsFetchError(f"Failed to fetch points from {url}: HTTP {response.status_code}")
        try:
            points = parse_point_records(response.json())
        except ValueError as e:
            raise PointsFetchError(f"Invalid point data from {url}: {e}") from e
    except httpx.HTTPError as e:
        logger.error("Failed to fetch points from %s: %s", url, e)
        raise PointsFetchError(f"Failed to fetch points from {url}: {e}") from e
    except PointsFetchError as e:
        logger.error("%s", e)
        raise
    finally:
        if owns_client:
            http.close()

    logger.info("Loaded %d control points from %s", len(points), url)
    return points
