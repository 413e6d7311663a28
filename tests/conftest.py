"""
Pytest fixtures for churn predictor tests.
"""

import numpy as np
import pandas as pd
import pytest

# Add package to path
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from churn_predictor.config import ScoringConfig
from churn_predictor.records import CustomerFeatures
from churn_predictor.scorer import ChurnScorer, generate_sample_data
from churn_predictor.storage import InMemoryStore


# Zero contribution from every rule
LOW_RISK = {
    "age": 45,
    "tenure_months": 36,
    "monthly_charges": 40.0,
    "total_charges": 1440.0,
    "contract_type": "Two year",
    "payment_method": "Credit card",
    "internet_service": "No",
    "online_security": True,
    "tech_support": True,
    "engagement_score": 90.0,
    "support_tickets": 0,
}

# Every rule at its highest tier: raw sum 1.26
HIGH_RISK = {
    "age": 29,
    "tenure_months": 3,
    "monthly_charges": 90.0,
    "total_charges": 270.0,
    "contract_type": "Month-to-month",
    "payment_method": "Electronic check",
    "internet_service": "Fiber optic",
    "online_security": False,
    "tech_support": False,
    "engagement_score": 20.0,
    "support_tickets": 7,
}


@pytest.fixture
def default_config():
    """Default scoring configuration."""
    return ScoringConfig()


@pytest.fixture
def rng():
    """Seeded generator for confidence draws."""
    return np.random.default_rng(1234)


@pytest.fixture
def scorer(default_config, rng):
    """ChurnScorer with default config and seeded confidence draws."""
    return ChurnScorer(default_config, rng=rng)


@pytest.fixture
def make_features():
    """Factory: low-risk features with overrides applied."""
    def _make(**overrides):
        return CustomerFeatures(**{**LOW_RISK, **overrides})
    return _make


@pytest.fixture
def low_risk_features():
    return CustomerFeatures(**LOW_RISK)


@pytest.fixture
def high_risk_features():
    return CustomerFeatures(**HIGH_RISK)


@pytest.fixture
def sample_data():
    """100 sample customers with realistic distributions."""
    return generate_sample_data(n_customers=100, seed=42)


@pytest.fixture
def edge_cases():
    """Specific edge cases for testing boundary conditions."""
    return pd.DataFrame([
        # Highest risk: every rule fires, sum clamped to 0.99
        {"customer_id": "EDGE_HIGH_RISK", **HIGH_RISK},
        # Lowest risk: no rule fires
        {"customer_id": "EDGE_LOW_RISK", **LOW_RISK},
        # 0.05 + 0.10 + 0.10 + 0.08 + 0.05 = 0.38
        {
            "customer_id": "EDGE_MEDIUM",
            **LOW_RISK,
            "tenure_months": 18,
            "contract_type": "One year",
            "monthly_charges": 70.0,
            "tech_support": False,
            "support_tickets": 2,
            "engagement_score": 55.0,
            "payment_method": "Mailed check",
            "internet_service": "DSL",
        },
        # Unknown categories fall back to code 0: 0.20 + 0.10 = 0.30
        {
            "customer_id": "EDGE_UNKNOWN",
            **LOW_RISK,
            "tenure_months": 30,
            "monthly_charges": 50.0,
            "engagement_score": 80.0,
            "contract_type": "Biennial",
            "payment_method": "Crypto",
            "internet_service": "Satellite",
        },
        # Exactly at the churn threshold: 0.25 + 0.20 + 0.05 = 0.50
        {
            "customer_id": "EDGE_THRESHOLD",
            **LOW_RISK,
            "tenure_months": 3,
            "contract_type": "Month-to-month",
            "internet_service": "Fiber optic",
        },
    ])


@pytest.fixture
def single_customer():
    """
    Single customer for simple tests.

    0.15 + 0.20 + 0.10 + 0.08 + 0.10 + 0.12 = 0.75
    """
    return {
        "age": 38,
        "tenure_months": 8,
        "monthly_charges": 65.0,
        "total_charges": 520.0,
        "contract_type": "Month-to-month",
        "payment_method": "Bank transfer",
        "internet_service": "DSL",
        "online_security": False,
        "tech_support": True,
        "engagement_score": 45.0,
        "support_tickets": 4,
    }


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryStore()
