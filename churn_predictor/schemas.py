"""
Data schema definitions for churn prediction model.

Uses Pandera for runtime validation of feature DataFrames at the
service boundary, so malformed input is rejected before scoring.
"""

import pandas as pd
import pandera as pa
from pandera import Column, Check, DataFrameSchema


# Schema for scoring input data.
# Categorical columns are free text: unknown values are scored with
# the first category's code instead of being rejected.
FEATURES_SCHEMA = DataFrameSchema(
    {
        "age": Column(
            int,
            nullable=False,
            description="Customer age in years (not used for scoring)"
        ),
        "tenure_months": Column(
            int,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Account age in months"
        ),
        "monthly_charges": Column(
            float,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Current monthly bill"
        ),
        "total_charges": Column(
            float,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Lifetime billed amount (not used for scoring)"
        ),
        "contract_type": Column(str, nullable=False),
        "payment_method": Column(str, nullable=False),
        "internet_service": Column(str, nullable=False),
        "online_security": Column(bool, nullable=False),
        "tech_support": Column(bool, nullable=False),
        "engagement_score": Column(
            float,
            nullable=False,
            checks=Check.in_range(0, 100),
            description="Product engagement score (0-100)"
        ),
        "support_tickets": Column(
            int,
            nullable=False,
            checks=Check.greater_than_or_equal_to(0),
            description="Support tickets opened"
        ),
    },
    strict=False,  # Allow extra columns (ids, labels, profile fields)
    coerce=True,   # Try to coerce types automatically
    description="Schema for churn prediction scoring input data"
)


# Coercion to int truncates, so fractional values are rejected first
INTEGER_COLUMNS = ["age", "tenure_months", "support_tickets"]


# Schema for scoring output data
PREDICTION_OUTPUT_SCHEMA = DataFrameSchema(
    {
        "churn_probability": Column(
            float,
            nullable=False,
            checks=Check.in_range(0.0, 0.99),
        ),
        "predicted_churned": Column(bool, nullable=False),
        "churn_risk_level": Column(
            str,
            nullable=False,
            checks=Check.isin(["Low", "Medium", "High"])
        ),
        "confidence_score": Column(
            float,
            nullable=False,
            checks=[
                Check.greater_than_or_equal_to(0.85),
                Check.less_than(0.95),
            ]
        ),
    },
    strict=False,  # Allow component columns
    description="Schema for churn prediction scoring output data"
)


def validate_features(df):
    """
    Validate and coerce a feature DataFrame.

    Raises:
        ValueError: If the frame violates FEATURES_SCHEMA or an integer
            column holds a fractional value
    """
    for column in INTEGER_COLUMNS:
        if column not in df.columns:
            continue
        values = pd.to_numeric(df[column], errors="coerce")
        if (values.notna() & (values % 1 != 0)).any():
            raise ValueError(
                f"Invalid customer features: {column} must be a whole number"
            )

    try:
        return FEATURES_SCHEMA.validate(df)
    except (pa.errors.SchemaError, pa.errors.SchemaErrors) as e:
        raise ValueError(f"Invalid customer features: {e}") from e
