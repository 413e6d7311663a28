"""
Fleet-level statistics over stored predictions.

Usage:
    from churn_predictor.aggregator import summarize

    stats = summarize(store.list_customers(), store.list_predictions())
    print(stats.average_churn_probability)
    print(stats.risk_distribution())
"""

from typing import Any, Mapping, Sequence, Union

from .records import PredictionRecord, Statistics


_LEVEL_FIELDS = {
    "High": "high_risk",
    "Medium": "medium_risk",
    "Low": "low_risk",
}


def _get(record: Union[PredictionRecord, Mapping[str, Any]], name: str) -> Any:
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def summarize(
    customers: Sequence[Any],
    predictions: Sequence[Union[PredictionRecord, Mapping[str, Any]]],
    decimals: int = 4,
) -> Statistics:
    """
    Summarize prediction history.

    Each prediction is classified by its stored churn_risk_level; the
    level is never recomputed from the probability. Records with an
    unrecognized level still count towards the total and the average.

    Args:
        customers: All customer records (only counted)
        predictions: All prediction records, as PredictionRecord or mappings
        decimals: Rounding for the average probability

    Returns:
        Statistics, zeroed when there are no predictions
    """
    counts = dict.fromkeys(_LEVEL_FIELDS.values(), 0)
    total = 0
    probability_sum = 0.0

    for record in predictions:
        total += 1
        field_name = _LEVEL_FIELDS.get(_get(record, "churn_risk_level"))
        if field_name is not None:
            counts[field_name] += 1
        probability_sum += float(_get(record, "churn_probability"))

    average = round(probability_sum / total, decimals) if total else 0.0

    return Statistics(
        total_customers=len(customers),
        total_predictions=total,
        average_churn_probability=average,
        **counts,
    )
