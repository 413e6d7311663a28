"""
Churn Predictor Package

A rule-based scoring system for predicting customer churn probability.
"""

from .scorer import ChurnScorer, ScoringResult, score, generate_sample_data
from .config import ScoringConfig
from .aggregator import summarize
from .records import (
    Customer,
    CustomerFeatures,
    PredictionRecord,
    PredictionResult,
    Statistics,
)
from .service import PredictionService

__all__ = [
    "ChurnScorer",
    "ScoringResult",
    "ScoringConfig",
    "score",
    "summarize",
    "generate_sample_data",
    "Customer",
    "CustomerFeatures",
    "PredictionRecord",
    "PredictionResult",
    "Statistics",
    "PredictionService",
]
__version__ = "1.0.0"
