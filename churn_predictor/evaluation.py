"""
Evaluation of the rule set against known churn outcomes.

Scores labelled customers and compares predicted_churned with
actual_churned. Read-only: nothing here changes the rule weights.
"""

from typing import Iterable, Optional, Union

import numpy as np
import pandas as pd
from sklearn.metrics import (
    accuracy_score,
    precision_score,
    recall_score,
    f1_score,
    fbeta_score,
    roc_auc_score,
    confusion_matrix,
)

from .records import Customer
from .scorer import ChurnScorer


LABEL_COLUMN = "actual_churned"


def customers_to_frame(customers: Iterable[Customer]) -> pd.DataFrame:
    """Build a feature DataFrame from Customer records."""
    return pd.DataFrame([customer.to_dict() for customer in customers])


def evaluate(
    customers: Union[pd.DataFrame, Iterable[Customer]],
    scorer: Optional[ChurnScorer] = None,
) -> dict:
    """
    Calculate classification metrics for labelled customers.

    Args:
        customers: DataFrame with feature columns and actual_churned,
            or Customer records
        scorer: ChurnScorer to evaluate. Default config if None.

    Returns:
        Dictionary with all metrics

    Raises:
        ValueError: If the label column is missing or there are no rows
    """
    df = customers if isinstance(customers, pd.DataFrame) else customers_to_frame(customers)
    if LABEL_COLUMN not in df.columns:
        raise ValueError(f"Missing required columns: {{'{LABEL_COLUMN}'}}")
    if df.empty:
        raise ValueError("No customers to evaluate")

    scorer = scorer or ChurnScorer()
    scored = scorer.score(df).df

    y_true = scored[LABEL_COLUMN].astype(int)
    y_pred = scored["predicted_churned"].astype(int)
    y_prob = scored["churn_probability"]

    cm = confusion_matrix(y_true, y_pred, labels=[0, 1])

    return {
        "n_customers": len(scored),
        "churn_rate": float(y_true.mean()),
        "accuracy": accuracy_score(y_true, y_pred),
        "precision": precision_score(y_true, y_pred, zero_division=0),
        "recall": recall_score(y_true, y_pred, zero_division=0),
        "f1": f1_score(y_true, y_pred, zero_division=0),
        "f2": fbeta_score(y_true, y_pred, beta=2, zero_division=0),
        "auc_roc": roc_auc_score(y_true, y_prob)
        if len(np.unique(y_true)) > 1
        else 0.0,
        "true_positives": int(cm[1, 1]),
        "true_negatives": int(cm[0, 0]),
        "false_positives": int(cm[0, 1]),
        "false_negatives": int(cm[1, 0]),
    }
