"""
Tests for the command line interface.
"""

import pytest

from churn_predictor import generate_sample_data
from churn_predictor.cli import main


@pytest.fixture
def customers_csv(tmp_path):
    path = tmp_path / "customers.csv"
    generate_sample_data(n_customers=30, seed=5).to_csv(path, index=False)
    return path


class TestCli:
    """Tests for cli.main()."""

    def test_score_csv(self, customers_csv, capsys):
        assert main(["score", str(customers_csv), "--seed", "1"]) == 0

        out = capsys.readouterr().out
        assert "churn_probability" in out
        assert "CUST_0000" in out

    def test_stats_sample(self, capsys):
        assert main(["stats", "--sample", "50"]) == 0

        out = capsys.readouterr().out
        assert "total_predictions: 50" in out
        assert "Risk distribution:" in out

    def test_evaluate_csv(self, customers_csv, capsys):
        assert main(["evaluate", str(customers_csv)]) == 0

        assert "Accuracy:" in capsys.readouterr().out

    def test_config_file(self, customers_csv, tmp_path, capsys):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("churn_threshold: 0.2\n")

        assert main(["stats", str(customers_csv), "--config", str(config_path)]) == 0

    def test_missing_csv(self, tmp_path, capsys):
        assert main(["score", str(tmp_path / "nope.csv")]) == 1
        assert "CSV not found" in capsys.readouterr().out

    def test_no_input_prints_help(self, capsys):
        assert main(["score"]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_evaluate_without_labels(self, tmp_path, capsys):
        path = tmp_path / "unlabelled.csv"
        generate_sample_data(10).drop(columns=["actual_churned"]).to_csv(path, index=False)

        assert main(["evaluate", str(path)]) == 1
        assert "actual_churned" in capsys.readouterr().out
