"""
Data quality and schema validation tests.

Tests input data validation, range checks, and output guarantees.
"""

import pandas as pd
import pandera as pa
import pytest

from churn_predictor import ChurnScorer, generate_sample_data
from churn_predictor.schemas import (
    FEATURES_SCHEMA,
    PREDICTION_OUTPUT_SCHEMA,
    validate_features,
)

from conftest import LOW_RISK


class TestFeatureSchema:
    """Input schema validation tests."""

    def test_sample_data_matches_schema(self, sample_data):
        validated_df = FEATURES_SCHEMA.validate(sample_data)
        assert len(validated_df) == len(sample_data)

    def test_unknown_categories_allowed(self):
        df = pd.DataFrame([{**LOW_RISK, "contract_type": "Biennial",
                            "internet_service": "Satellite"}])

        validated = FEATURES_SCHEMA.validate(df)
        assert validated["contract_type"].iloc[0] == "Biennial"

    @pytest.mark.parametrize("column,value", [
        ("tenure_months", -1),
        ("monthly_charges", -5.0),
        ("total_charges", -0.01),
        ("engagement_score", 100.5),
        ("engagement_score", -1.0),
        ("support_tickets", -2),
    ])
    def test_out_of_range_rejected(self, column, value):
        df = pd.DataFrame([{**LOW_RISK, column: value}])

        with pytest.raises(pa.errors.SchemaError):
            FEATURES_SCHEMA.validate(df)

    def test_null_rejected(self):
        df = pd.DataFrame([{**LOW_RISK, "tenure_months": None}])

        with pytest.raises((pa.errors.SchemaError, pa.errors.SchemaErrors)):
            FEATURES_SCHEMA.validate(df)

    def test_missing_column_rejected(self):
        df = pd.DataFrame([{k: v for k, v in LOW_RISK.items() if k != "support_tickets"}])

        with pytest.raises(pa.errors.SchemaError):
            FEATURES_SCHEMA.validate(df)

    def test_age_has_no_range(self):
        df = pd.DataFrame([{**LOW_RISK, "age": 131}])

        assert validate_features(df)["age"].iloc[0] == 131

    @pytest.mark.parametrize("column", ["age", "tenure_months", "support_tickets"])
    def test_fractional_integer_rejected(self, column):
        df = pd.DataFrame([{**LOW_RISK, column: 5.5}])

        with pytest.raises(ValueError, match=f"{column} must be a whole number"):
            validate_features(df)

    def test_extra_columns_kept(self, sample_data):
        validated = FEATURES_SCHEMA.validate(sample_data)

        assert "customer_id" in validated.columns
        assert "actual_churned" in validated.columns

    def test_validate_features_raises_value_error(self):
        df = pd.DataFrame([{**LOW_RISK, "support_tickets": -1}])

        with pytest.raises(ValueError, match="Invalid customer features"):
            validate_features(df)


class TestOutputSchema:
    """Scored output always satisfies the output schema."""

    def test_sample_output_valid(self, scorer):
        df = generate_sample_data(n_customers=1000, seed=3)
        result = scorer.score(df)

        PREDICTION_OUTPUT_SCHEMA.validate(result.df)

    def test_edge_case_output_valid(self, scorer, edge_cases):
        PREDICTION_OUTPUT_SCHEMA.validate(scorer.score(edge_cases).df)


class TestSampleData:
    """Generated sample data is usable for tests and demos."""

    def test_reproducible(self):
        pd.testing.assert_frame_equal(
            generate_sample_data(50, seed=9),
            generate_sample_data(50, seed=9),
        )

    def test_no_duplicate_customer_ids(self, sample_data):
        assert sample_data["customer_id"].duplicated().sum() == 0

    def test_required_columns_present(self, sample_data):
        missing = set(ChurnScorer.REQUIRED_COLUMNS) - set(sample_data.columns)
        assert len(missing) == 0, f"Missing required columns: {missing}"

    def test_churn_rate_reasonable(self):
        df = generate_sample_data(n_customers=2000, seed=11)
        churn_rate = df["actual_churned"].mean()

        assert 0.15 <= churn_rate <= 0.60, f"Unusual churn rate: {churn_rate:.1%}"
