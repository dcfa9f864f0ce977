import logging
from urllib.parse import urljoin

import requests

from wine_dashboard.settings import Settings, settings

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Prediction request failed"
NETWORK_FAILURE = (
    "Network error: could not reach the prediction service. Check your "
    "connection and the configured PREDICTION_URL, and make sure the service "
    "or proxy in front of it accepts requests from this origin (CORS)."
)
TIMEOUT_FAILURE = (
    "Network error: the prediction service did not respond within {timeout:g}s. "
    "It may be unreachable from this host or blocked by a proxy."
)


class PredictionError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PredictionRequestError(PredictionError):
    """The service answered, but not with a usable prediction."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PredictionTransportError(PredictionError):
    """No response was received at all."""


def resolve_prediction_url(cfg: Settings = settings) -> str:
    if cfg.prediction_url.startswith(("http://", "https://")):
        return cfg.prediction_url
    return urljoin(cfg.api_base_url.rstrip("/") + "/", cfg.prediction_url.lstrip("/"))


def _error_message(r: requests.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return GENERIC_FAILURE
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return GENERIC_FAILURE


def predict_quality(
    payload: dict, url: str | None = None, timeout: float | None = None
) -> float:
    url = url or resolve_prediction_url()
    timeout = settings.request_timeout if timeout is None else timeout
    try:
        r = requests.post(url, json=payload, timeout=timeout)
    except requests.Timeout as e:
        raise PredictionTransportError(TIMEOUT_FAILURE.format(timeout=timeout)) from e
    except requests.RequestException as e:
        raise PredictionTransportError(NETWORK_FAILURE) from e

    if not r.ok:
        raise PredictionRequestError(_error_message(r), status_code=r.status_code)

    try:
        body = r.json()
    except ValueError:
        raise PredictionRequestError(GENERIC_FAILURE, status_code=r.status_code)

    value = body.get("predicted_quality") if isinstance(body, dict) else None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PredictionRequestError(_error_message(r), status_code=r.status_code)
    return float(value)


def check_health(timeout: float = 5.0) -> dict:
    r = requests.get(f"{settings.api_base_url.rstrip('/')}/health", timeout=timeout)
    r.raise_for_status()
    return r.json()
