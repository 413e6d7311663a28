"""
Prediction service - the boundary between callers and the scoring core.

Usage:
    from churn_predictor import PredictionService
    from churn_predictor.storage import InMemoryStore

    service = PredictionService(InMemoryStore())
    result = service.predict(features, customer_id="CUST_0001")
    batch = service.batch_predict([{"id": "CUST_0002", "features": {...}}])
    stats = service.statistics()

Writes are best-effort: a storage failure is logged and the prediction
is still returned. Reads for statistics are not; their errors propagate.
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

import pandas as pd

from .aggregator import summarize
from .records import CustomerFeatures, PredictionRecord, PredictionResult, Statistics
from .schemas import validate_features
from .scorer import ChurnScorer
from .storage import PredictionStore

logger = logging.getLogger(__name__)

FeaturesInput = Union[CustomerFeatures, Mapping[str, Any]]


class PredictionService:
    """Scores customers, records predictions and reports statistics."""

    def __init__(self, store: PredictionStore, scorer: Optional[ChurnScorer] = None):
        """
        Initialize service.

        Args:
            store: Storage for customers and predictions
            scorer: ChurnScorer to use. Default config if None.
        """
        self.store = store
        self.scorer = scorer or ChurnScorer()

    @property
    def model_version(self) -> str:
        return self.scorer.config.model_version

    def _frame(self, features: list[CustomerFeatures]) -> pd.DataFrame:
        df = pd.DataFrame([f.to_dict() for f in features])
        return validate_features(df)

    @staticmethod
    def _as_features(features: FeaturesInput) -> CustomerFeatures:
        if isinstance(features, CustomerFeatures):
            return features
        if not isinstance(features, Mapping):
            raise ValueError("Features are required")
        return CustomerFeatures.from_dict(features)

    def predict(
        self,
        features: FeaturesInput,
        customer_id: Optional[str] = None,
    ) -> PredictionResult:
        """
        Score one customer and record the prediction if an id is given.

        Args:
            features: CustomerFeatures or a mapping of feature values
            customer_id: Customer to record the prediction against

        Returns:
            PredictionResult

        Raises:
            ValueError: If features are missing or invalid
        """
        features = self._as_features(features)
        result = self.scorer.score(self._frame([features])).to_results()[0]

        if customer_id:
            record = PredictionRecord.from_result(
                customer_id, result, features, self.model_version
            )
            self._save([record])

        return result

    def batch_predict(self, items: Iterable[Mapping[str, Any]]) -> list[dict]:
        """
        Score many customers and record all predictions in one write.

        Args:
            items: Mappings with "id" and "features" keys

        Returns:
            One dict per item: customer_id plus the PredictionResult fields

        Raises:
            ValueError: If items are malformed
        """
        if items is None or isinstance(items, (str, bytes, Mapping)):
            raise ValueError("Customers array is required")

        ids = []
        features = []
        for item in items:
            if not isinstance(item, Mapping) or "features" not in item:
                raise ValueError("Each customer needs an id and features")
            ids.append(item.get("id"))
            features.append(self._as_features(item["features"]))

        if not features:
            return []

        results = self.scorer.score(self._frame(features)).to_results()

        records = [
            PredictionRecord.from_result(customer_id, result, feats, self.model_version)
            for customer_id, result, feats in zip(ids, results, features)
        ]
        self._save(records)

        return [
            {"customer_id": customer_id, **result.to_dict()}
            for customer_id, result in zip(ids, results)
        ]

    def predict_customer(self, customer_id: str) -> PredictionResult:
        """
        Score a stored customer and record the prediction.

        Raises:
            KeyError: If the customer does not exist
        """
        customer = self.store.get_customer(customer_id)
        if customer is None:
            raise KeyError(f"Unknown customer: {customer_id}")
        return self.predict(customer.features(), customer_id=customer.id)

    def statistics(self) -> Statistics:
        """Summarize all stored customers and predictions."""
        customers = self.store.list_customers()
        predictions = self.store.list_predictions()
        return summarize(customers, predictions, decimals=self.scorer.config.decimals)

    def _save(self, records: list[PredictionRecord]) -> None:
        try:
            self.store.save_predictions(records)
        except Exception:
            logger.error("Error saving %d prediction(s)", len(records), exc_info=True)
        else:
            logger.debug("Saved %d prediction(s)", len(records))
