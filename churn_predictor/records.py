"""
Value records passed between the scorer, the aggregator and storage.

All records are immutable. ``from_dict``/``to_dict`` convert to and from
the plain mappings used at the service boundary and in JSON storage.
"""

import uuid
from dataclasses import dataclass, field, asdict, fields
from datetime import datetime, timezone
from typing import Any, Mapping, Optional


FEATURE_FIELDS = (
    "age",
    "tenure_months",
    "monthly_charges",
    "total_charges",
    "contract_type",
    "payment_method",
    "internet_service",
    "online_security",
    "tech_support",
    "engagement_score",
    "support_tickets",
)

RISK_LEVELS = ("Low", "Medium", "High")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


@dataclass(frozen=True)
class CustomerFeatures:
    """
    Attributes the scorer reads for one customer.

    age and total_charges are carried for display and storage only;
    the rule set does not use them.
    """

    age: int
    tenure_months: int
    monthly_charges: float
    total_charges: float
    contract_type: str
    payment_method: str
    internet_service: str
    online_security: bool
    tech_support: bool
    engagement_score: float
    support_tickets: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomerFeatures":
        """
        Build features from a mapping, ignoring unrelated keys.

        Raises:
            ValueError: If any feature is missing or null
        """
        missing = [name for name in FEATURE_FIELDS if data.get(name) is None]
        if missing:
            raise ValueError(f"Missing required features: {missing}")
        return cls(**{name: data[name] for name in FEATURE_FIELDS})

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PredictionResult:
    """Scorer output for a single customer."""

    churn_probability: float
    predicted_churned: bool
    churn_risk_level: str
    confidence_score: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PredictionRecord:
    """A persisted prediction. Created once, never updated."""

    customer_id: Optional[str]
    churn_probability: float
    churn_risk_level: str
    predicted_churned: bool
    confidence_score: float
    features_used: dict
    model_version: str = "v1.0"
    prediction_date: datetime = field(default_factory=_utcnow)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def from_result(
        cls,
        customer_id: Optional[str],
        result: PredictionResult,
        features: CustomerFeatures,
        model_version: str = "v1.0",
    ) -> "PredictionRecord":
        """Wrap a scorer result for storage."""
        return cls(
            customer_id=customer_id,
            churn_probability=result.churn_probability,
            churn_risk_level=result.churn_risk_level,
            predicted_churned=result.predicted_churned,
            confidence_score=result.confidence_score,
            features_used=features.to_dict(),
            model_version=model_version,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PredictionRecord":
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if "prediction_date" in values:
            values["prediction_date"] = _parse_timestamp(values["prediction_date"])
        return cls(**values)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["prediction_date"] = self.prediction_date.isoformat()
        return data


@dataclass(frozen=True)
class Customer:
    """A stored customer with profile fields, features and churn label."""

    id: str
    customer_name: str
    email: str
    gender: str
    age: int
    tenure_months: int
    monthly_charges: float
    total_charges: float
    contract_type: str
    payment_method: str
    internet_service: str
    online_security: bool
    tech_support: bool
    engagement_score: float
    support_tickets: int
    actual_churned: bool = False
    created_at: datetime = field(default_factory=_utcnow)

    def features(self) -> CustomerFeatures:
        return CustomerFeatures(**{name: getattr(self, name) for name in FEATURE_FIELDS})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Customer":
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if "created_at" in values:
            values["created_at"] = _parse_timestamp(values["created_at"])
        return cls(**values)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data


@dataclass(frozen=True)
class Statistics:
    """Fleet-level summary of stored predictions."""

    total_customers: int = 0
    total_predictions: int = 0
    high_risk: int = 0
    medium_risk: int = 0
    low_risk: int = 0
    average_churn_probability: float = 0.0

    def risk_distribution(self) -> dict:
        """
        Count and percentage of predictions per risk level.

        Percentages are of total_predictions, rounded to 1 decimal.
        An empty history reports 0% everywhere.
        """
        total = self.total_predictions or 1
        counts = {
            "High": self.high_risk,
            "Medium": self.medium_risk,
            "Low": self.low_risk,
        }
        return {
            level: {"count": count, "percentage": round(count / total * 100, 1)}
            for level, count in counts.items()
        }

    def to_dict(self) -> dict:
        return asdict(self)
