from __future__ import annotations

import logging
import math
from typing import Callable

from wine_dashboard import api_client
from wine_dashboard.api_client import PredictionError, PredictionTransportError
from wine_dashboard.features import FEATURE_RANGES, FeatureSet
from wine_dashboard.outcome import (
    Failed,
    Idle,
    Pending,
    PredictionOutcome,
    Succeeded,
)

logger = logging.getLogger(__name__)


class PredictionController:
    """
    Owns the feature values for one dashboard session and the lifecycle of
    the prediction request made from them.

    At most one request is in flight: begin() checks and sets Pending
    before the network call, and returns early while Pending. predict()
    is begin() followed by resolve(); the page calls the two separately so
    it can render between them.
    """

    def __init__(
        self,
        features: FeatureSet | None = None,
        predict_fn: Callable[[dict], float] | None = None,
    ):
        self._features = features or FeatureSet()
        self._outcome: PredictionOutcome = Idle()
        self._in_flight = False
        self._predict_fn = predict_fn or api_client.predict_quality

    @property
    def features(self) -> FeatureSet:
        return self._features

    @property
    def outcome(self) -> PredictionOutcome:
        return self._outcome

    @property
    def is_pending(self) -> bool:
        return isinstance(self._outcome, Pending)

    def get_feature(self, name: str) -> float:
        if name not in FEATURE_RANGES:
            raise ValueError(f"Unknown feature: {name}")
        return getattr(self._features, name)

    def set_feature(self, name: str, raw_value) -> None:
        rng = FEATURE_RANGES.get(name)
        if rng is None:
            raise ValueError(f"Unknown feature: {name}")
        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            logger.debug("Ignoring unparsable value %r for %s", raw_value, name)
            return
        if math.isnan(value) or not rng.contains(value):
            logger.debug("Ignoring out-of-range value %r for %s", raw_value, name)
            return

        if name == "type_white":
            if value in (0.0, 1.0):
                self.set_type(int(value))
            return
        self._features = self._features.model_copy(update={name: value})

    def set_type(self, value: int) -> None:
        if isinstance(value, bool) or value not in (0, 1):
            raise ValueError(f"type_white must be 0 (red) or 1 (white), got {value!r}")
        self._features = self._features.model_copy(update={"type_white": int(value)})

    def payload(self) -> dict:
        return self._features.to_payload()

    def begin(self) -> bool:
        """
        Move to Pending so the page can draw the in-flight state before the
        request is sent. Returns False if a request is already pending.
        """
        if self.is_pending:
            logger.info("Prediction already in flight; ignoring request")
            return False
        self._outcome = Pending()
        return True

    def resolve(self) -> PredictionOutcome:
        """Send the request started by begin() and record its outcome."""
        if not self.is_pending or self._in_flight:
            return self._outcome

        body = self.payload()
        logger.info("Requesting prediction for %s", body)
        self._in_flight = True
        try:
            value = self._predict_fn(body)
        except PredictionTransportError as e:
            logger.error("Prediction transport failure: %s", e.__cause__ or e)
            self._outcome = Failed(e.message)
        except PredictionError as e:
            logger.warning("Prediction rejected: %s", e.message)
            self._outcome = Failed(e.message)
        except Exception:
            # Keep the session usable if the client fails in an unexpected way
            logger.exception("Unexpected prediction failure")
            self._outcome = Failed(api_client.GENERIC_FAILURE)
        else:
            logger.info("Predicted quality %.3f", value)
            self._outcome = Succeeded(value)
        finally:
            self._in_flight = False
        return self._outcome

    def predict(self) -> PredictionOutcome:
        if not self.begin():
            return self._outcome
        return self.resolve()
