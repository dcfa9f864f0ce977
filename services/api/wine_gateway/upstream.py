from __future__ import annotations

import logging

import requests

from .settings import settings

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Prediction request failed"
UNREACHABLE = "Upstream prediction service is unreachable"


class UpstreamError(Exception):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def forward_prediction(payload: dict) -> float:
    """
    POST payload to the configured prediction service and return its
    predicted_quality. Raises UpstreamError carrying the status to relay:
    the upstream status for rejections, 502 for anything unusable.
    """
    url = settings.upstream_prediction_url
    try:
        r = requests.post(url, json=payload, timeout=settings.upstream_timeout)
    except requests.Timeout as e:
        logger.error("Upstream %s timed out: %s", url, e)
        raise UpstreamError(
            f"{UNREACHABLE} (no response within {settings.upstream_timeout:g}s)", 504
        ) from e
    except requests.RequestException as e:
        logger.error("Upstream %s unreachable: %s", url, e)
        raise UpstreamError(UNREACHABLE, 502) from e

    try:
        body = r.json()
    except ValueError:
        body = None

    if not r.ok:
        message = GENERIC_FAILURE
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            message = body["error"] or GENERIC_FAILURE
        logger.warning("Upstream rejected prediction (%s): %s", r.status_code, message)
        raise UpstreamError(message, r.status_code)

    value = body.get("predicted_quality") if isinstance(body, dict) else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning("Upstream response missing predicted_quality: %r", body)
        raise UpstreamError(f"{GENERIC_FAILURE}: no predicted_quality in response", 502)
    return float(value)
