"""
Main ChurnScorer class - orchestrates scoring components.

Usage:
    from churn_predictor import ChurnScorer, ScoringConfig

    # With default config
    scorer = ChurnScorer()
    result = scorer.score(df)

    # Single customer
    prediction = scorer.score_single(features)

    # Reproducible confidence draws
    scorer = ChurnScorer(rng=np.random.default_rng(7))

    # Access results
    print(result.df[["customer_id", "churn_probability", "churn_risk_level"]])
    print(result.summary())
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .config import ScoringConfig, DEFAULT_CONFIG
from .components import (
    TenureScorer,
    ContractScorer,
    ChargesScorer,
    AddOnScorer,
    TicketScorer,
    EngagementScorer,
    PaymentScorer,
    InternetScorer,
)
from .records import FEATURE_FIELDS, RISK_LEVELS, CustomerFeatures, PredictionResult


RESULT_COLUMNS = [
    "churn_probability",
    "predicted_churned",
    "churn_risk_level",
    "confidence_score",
]


@dataclass
class ScoringResult:
    """
    Container for scoring results with component breakdown.

    Attributes:
        df: Original DataFrame with contributions and results added
        component_columns: List of component contribution column names
    """

    df: pd.DataFrame
    component_columns: list[str]

    def get_high_risk(self, min_level: str = "High") -> pd.DataFrame:
        """
        Get customers at or above a risk level.

        Args:
            min_level: Minimum risk level ("Low", "Medium", "High")

        Returns:
            DataFrame filtered to customers at or above the specified level
        """
        min_idx = RISK_LEVELS.index(min_level)
        valid_levels = list(RISK_LEVELS[min_idx:])
        return self.df[self.df["churn_risk_level"].isin(valid_levels)]

    def summary(self) -> pd.DataFrame:
        """
        Generate summary statistics by contract type and risk level.

        Returns:
            DataFrame with counts and mean probability
        """
        return (
            self.df.groupby(["contract_type", "churn_risk_level"])
            .agg(
                count=("churn_probability", "count"),
                avg_probability=("churn_probability", "mean"),
            )
            .round(4)
        )

    def component_breakdown(self) -> pd.DataFrame:
        """
        Show average contribution of each component.

        Returns:
            DataFrame with component statistics
        """
        stats = {}
        for col in self.component_columns:
            component_name = col.replace("_score", "")
            stats[component_name] = {
                "mean": self.df[col].mean(),
                "max": self.df[col].max(),
                "min": self.df[col].min(),
            }
        return pd.DataFrame(stats).T.round(4)

    def to_results(self) -> list[PredictionResult]:
        """Convert each scored row into a PredictionResult."""
        return [
            PredictionResult(
                churn_probability=float(row.churn_probability),
                predicted_churned=bool(row.predicted_churned),
                churn_risk_level=str(row.churn_risk_level),
                confidence_score=float(row.confidence_score),
            )
            for row in self.df[RESULT_COLUMNS].itertuples(index=False)
        ]


class ChurnScorer:
    """
    Vectorized churn probability scoring engine.

    Calculates component contributions independently using pandas
    operations, sums them and clamps the sum into a probability.

    Components:
    - Tenure (0-0.25): Based on account age
    - Contract (0-0.20): Based on contract type
    - Charges (0-0.15): Based on monthly charges
    - Add-ons (0-0.16): Missing online security / tech support
    - Tickets (0-0.15): Based on support ticket count
    - Engagement (0-0.20): Based on engagement score
    - Payment (0-0.10): Electronic check
    - Internet (0-0.05): Fiber optic
    """

    REQUIRED_COLUMNS = list(FEATURE_FIELDS)

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize scorer with configuration.

        Args:
            config: ScoringConfig instance. Uses DEFAULT_CONFIG if None.
            rng: Generator for confidence draws. Unseeded if None.
        """
        self.config = config or DEFAULT_CONFIG
        self.rng = rng if rng is not None else np.random.default_rng()
        self._init_components()

    def _init_components(self) -> None:
        """Initialize all scoring components."""
        self.components = {
            "tenure": TenureScorer(self.config),
            "contract": ContractScorer(self.config),
            "charges": ChargesScorer(self.config),
            "addons": AddOnScorer(self.config),
            "tickets": TicketScorer(self.config),
            "engagement": EngagementScorer(self.config),
            "payment": PaymentScorer(self.config),
            "internet": InternetScorer(self.config),
        }

    def validate_input(self, df: pd.DataFrame) -> None:
        """
        Validate required columns exist.

        Args:
            df: Input DataFrame

        Raises:
            ValueError: If required columns are missing
        """
        missing = set(self.REQUIRED_COLUMNS) - set(df.columns)
        if missing:
            raise ValueError(f"Missing required columns: {missing}")

    def score(
        self, df: pd.DataFrame, rng: Optional[np.random.Generator] = None
    ) -> ScoringResult:
        """
        Calculate churn probability for all customers.

        Args:
            df: DataFrame with one row of features per customer
            rng: Generator for confidence draws. Uses self.rng if None.

        Returns:
            ScoringResult with results and component breakdown

        Example:
            >>> scorer = ChurnScorer()
            >>> result = scorer.score(customer_df)
            >>> high_risk = result.get_high_risk("High")
        """
        self.validate_input(df)
        result = df.copy()
        config = self.config

        # Calculate all component contributions (vectorized)
        component_cols = []
        for name, component in self.components.items():
            col_name = f"{name}_score"
            result[col_name] = component.score(result)
            component_cols.append(col_name)

        result["raw_score"] = result[component_cols].sum(axis=1).astype(float)

        # Tier and decision use the rounded probability
        result["churn_probability"] = (
            result["raw_score"]
            .clip(lower=config.min_probability, upper=config.max_probability)
            .round(config.decimals)
        )
        result["predicted_churned"] = result["churn_probability"] > config.churn_threshold
        result["churn_risk_level"] = config.get_risk_levels(result["churn_probability"])
        result["confidence_score"] = draw_confidence(
            rng if rng is not None else self.rng, len(result), config
        )

        return ScoringResult(df=result, component_columns=component_cols)

    def score_single(
        self,
        features: CustomerFeatures,
        rng: Optional[np.random.Generator] = None,
    ) -> PredictionResult:
        """
        Score a single customer.

        Args:
            features: CustomerFeatures for one customer
            rng: Generator for the confidence draw. Uses self.rng if None.

        Returns:
            PredictionResult
        """
        df = pd.DataFrame([features.to_dict()])
        return self.score(df, rng=rng).to_results()[0]

    def explain(self, features: CustomerFeatures) -> dict:
        """
        Per-component contributions for a single customer.

        Returns:
            Dictionary mapping component name to its contribution
        """
        df = pd.DataFrame([features.to_dict()])
        row = self.score(df).df.iloc[0]
        return {
            name: float(row[f"{name}_score"])
            for name in self.components
        }


def draw_confidence(
    rng: np.random.Generator, size: int, config: ScoringConfig = DEFAULT_CONFIG
) -> np.ndarray:
    """
    Draw placeholder confidence scores.

    Values are uniform on config.confidence_range, rounded to
    config.decimals and kept strictly below the upper bound.
    """
    low, high = config.confidence_range
    values = np.round(rng.uniform(low, high, size=size), config.decimals)
    ceiling = round(high - 10 ** -config.decimals, config.decimals)
    return np.minimum(values, ceiling)


def score(
    features: CustomerFeatures,
    rng: Optional[np.random.Generator] = None,
    config: Optional[ScoringConfig] = None,
) -> PredictionResult:
    """Score one customer with a fresh ChurnScorer."""
    return ChurnScorer(config, rng=rng).score_single(features)


def generate_sample_data(n_customers: int = 100, seed: int = 42) -> pd.DataFrame:
    """
    Generate realistic sample data for testing.

    Distributions loosely follow a telecom customer base:
    - Contract: Month-to-month 55%, One year 25%, Two year 20%
    - Tenure skewed towards newer accounts
    - actual_churned drawn with higher odds for new, uncommitted,
      disengaged customers
    """
    rng = np.random.default_rng(seed)

    contract_type = rng.choice(
        ["Month-to-month", "One year", "Two year"],
        size=n_customers,
        p=[0.55, 0.25, 0.20],
    )
    payment_method = rng.choice(
        ["Electronic check", "Mailed check", "Bank transfer", "Credit card"],
        size=n_customers,
        p=[0.35, 0.20, 0.22, 0.23],
    )
    internet_service = rng.choice(
        ["No", "DSL", "Fiber optic"],
        size=n_customers,
        p=[0.20, 0.35, 0.45],
    )

    tenure_months = np.clip(
        rng.exponential(scale=20, size=n_customers).astype(int), 0, 72
    )
    monthly_charges = np.clip(
        rng.normal(loc=65, scale=25, size=n_customers), 18, 120
    ).round(2)
    total_charges = (monthly_charges * np.maximum(tenure_months, 1)).round(2)
    engagement_score = np.clip(
        rng.normal(loc=55, scale=22, size=n_customers), 0, 100
    ).round(1)
    support_tickets = rng.poisson(lam=2.5, size=n_customers)

    churn_odds = (
        0.05
        + 0.25 * (tenure_months < 12)
        + 0.25 * (contract_type == "Month-to-month")
        + 0.20 * (engagement_score < 40)
        + 0.10 * (support_tickets > 3)
    )
    actual_churned = rng.random(n_customers) < churn_odds

    return pd.DataFrame(
        {
            "customer_id": [f"CUST_{i:04d}" for i in range(n_customers)],
            "age": rng.integers(18, 80, size=n_customers),
            "tenure_months": tenure_months,
            "monthly_charges": monthly_charges,
            "total_charges": total_charges,
            "contract_type": contract_type,
            "payment_method": payment_method,
            "internet_service": internet_service,
            "online_security": rng.random(n_customers) < 0.45,
            "tech_support": rng.random(n_customers) < 0.40,
            "engagement_score": engagement_score,
            "support_tickets": support_tickets,
            "actual_churned": actual_churned,
        }
    )
