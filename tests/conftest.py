"""
Pytest configuration and fixtures
"""
import json

import pytest
import requests


def make_response(status_code: int, body=None, raw: bytes | None = None) -> requests.Response:
    """Build a real requests.Response with the given status and JSON body"""
    r = requests.Response()
    r.status_code = status_code
    r.url = "http://test/predict_wine"
    if raw is not None:
        r._content = raw
    elif body is not None:
        r._content = json.dumps(body).encode()
    else:
        r._content = b""
    return r


@pytest.fixture
def reference_features() -> dict:
    return {
        "fixed_acidity": 7.0,
        "volatile_acidity": 0.27,
        "citric_acid": 0.36,
        "chlorides": 0.05,
        "free_sulfur_dioxide": 30,
        "density": 0.995,
        "alcohol": 10.5,
        "type_white": 1,
    }
