"""
Tests for the prediction gateway API
"""
import json
from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from conftest import make_response
from wine_gateway.main import app
from wine_gateway.settings import settings
from wine_gateway.upstream import GENERIC_FAILURE, UNREACHABLE

client = TestClient(app)


@pytest.fixture
def upstream_post():
    with patch("wine_gateway.upstream.requests.post") as post:
        yield post


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "upstream_url": settings.upstream_prediction_url,
    }


def test_predict_forwards_payload(upstream_post, reference_features):
    upstream_post.return_value = make_response(200, {"predicted_quality": 6.2, "extra": 1})

    response = client.post("/predict_wine", json=reference_features)

    assert response.status_code == 200
    assert response.json() == {"predicted_quality": 6.2}
    args, kwargs = upstream_post.call_args
    assert args == (settings.upstream_prediction_url,)
    assert kwargs["json"] == reference_features
    assert kwargs["timeout"] == settings.upstream_timeout


def test_upstream_error_is_relayed(upstream_post, reference_features):
    upstream_post.return_value = make_response(500, {"error": "model unavailable"})

    response = client.post("/predict_wine", json=reference_features)

    assert response.status_code == 500
    assert response.json() == {"error": "model unavailable"}


def test_upstream_error_without_body(upstream_post, reference_features):
    upstream_post.return_value = make_response(503, raw=b"Service Unavailable")

    response = client.post("/predict_wine", json=reference_features)

    assert response.status_code == 503
    assert response.json() == {"error": GENERIC_FAILURE}


def test_upstream_success_without_field_is_bad_gateway(upstream_post, reference_features):
    upstream_post.return_value = make_response(200, {"quality": 6})

    response = client.post("/predict_wine", json=reference_features)

    assert response.status_code == 502
    assert response.json()["error"].startswith(GENERIC_FAILURE)


def test_upstream_unreachable(upstream_post, reference_features):
    upstream_post.side_effect = requests.ConnectionError("refused")

    response = client.post("/predict_wine", json=reference_features)

    assert response.status_code == 502
    assert response.json() == {"error": UNREACHABLE}


def test_upstream_timeout(upstream_post, reference_features):
    upstream_post.side_effect = requests.ReadTimeout("slow")

    response = client.post("/predict_wine", json=reference_features)

    assert response.status_code == 504
    assert response.json()["error"].startswith(UNREACHABLE)


@pytest.mark.parametrize(
    "change",
    [
        {"type_white": 2},
        {"alcohol": "strong"},
        {"density": None},
        {"fixed_acidity": float("nan")},
        {"alcohol": float("inf")},
    ],
)
def test_invalid_body_reports_error_field(upstream_post, reference_features, change):
    # json.dumps writes NaN / Infinity literals, which the JSON body parser accepts
    response = client.post(
        "/predict_wine",
        content=json.dumps({**reference_features, **change}),
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json()["error"].startswith("Invalid input:")
    assert next(iter(change)) in response.json()["error"]
    upstream_post.assert_not_called()


def test_missing_field_is_rejected(upstream_post, reference_features):
    body = dict(reference_features)
    del body["chlorides"]

    response = client.post("/predict_wine", json=body)

    assert response.status_code == 422
    assert "chlorides" in response.json()["error"]
    upstream_post.assert_not_called()


def test_out_of_range_values_are_forwarded(upstream_post, reference_features):
    # Range checks belong to the dashboard; the gateway only checks shape
    upstream_post.return_value = make_response(200, {"predicted_quality": 3.0})
    body = {**reference_features, "alcohol": 1e9}

    response = client.post("/predict_wine", json=body)

    assert response.status_code == 200
    assert upstream_post.call_args.kwargs["json"]["alcohol"] == 1e9
