#!/usr/bin/env python3
"""
CLI entry point for churn scoring.

Usage:
    # Score a CSV of customer features
    python -m churn_predictor.cli score customers.csv

    # Fleet statistics for a CSV
    python -m churn_predictor.cli stats customers.csv

    # Metrics against actual_churned labels
    python -m churn_predictor.cli evaluate customers.csv

    # Use generated sample data instead of a CSV
    python -m churn_predictor.cli stats --sample 500
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
import pandas as pd

from .aggregator import summarize
from .config import ScoringConfig
from .evaluation import evaluate
from .schemas import validate_features
from .scorer import ChurnScorer, generate_sample_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rule-based customer churn scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m churn_predictor.cli score customers.csv
  python -m churn_predictor.cli stats --sample 500
  python -m churn_predictor.cli evaluate customers.csv --config strict.yaml
        """,
    )

    parser.add_argument(
        "command",
        choices=["score", "stats", "evaluate"],
        help="What to do with the customers",
    )
    parser.add_argument(
        "csv",
        nargs="?",
        help="Path to a CSV of customer features",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Use N generated customers instead of a CSV",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML ScoringConfig",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for confidence draws",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def load_customers(args) -> pd.DataFrame:
    if args.sample:
        return generate_sample_data(n_customers=args.sample)

    path = Path(args.csv)
    if not path.exists():
        raise FileNotFoundError(f"CSV not found: {args.csv}")
    return pd.read_csv(path)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.csv and not args.sample:
        parser.print_help()
        return 1

    try:
        config = ScoringConfig.from_yaml(args.config) if args.config else None
        df = validate_features(load_customers(args))
    except (OSError, ValueError, TypeError) as e:
        print(f"ERROR: {e}")
        return 1

    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    scorer = ChurnScorer(config, rng=rng)

    if args.command == "score":
        result = scorer.score(df)
        columns = [
            col for col in ["customer_id", "churn_probability", "churn_risk_level",
                            "predicted_churned", "confidence_score"]
            if col in result.df.columns
        ]
        print(result.df[columns].to_string(index=False))
        return 0

    if args.command == "stats":
        result = scorer.score(df)
        stats = summarize(df.index, result.df.to_dict("records"))

        print(f"\n{'=' * 60}")
        print("STATISTICS")
        print("=" * 60)
        for key, value in stats.to_dict().items():
            print(f"  {key}: {value}")

        print("\nRisk distribution:")
        for level, entry in stats.risk_distribution().items():
            print(f"  {level}: {entry['count']} ({entry['percentage']:.1f}%)")

        print("\nComponent breakdown:")
        print(result.component_breakdown().to_string())
        return 0

    try:
        metrics = evaluate(df, scorer=scorer)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"\n{'=' * 60}")
    print(f"EVALUATION ({metrics['n_customers']} customers)")
    print("=" * 60)
    print(f"  Accuracy:  {metrics['accuracy']:.1%}")
    print(f"  Precision: {metrics['precision']:.1%}")
    print(f"  Recall:    {metrics['recall']:.1%}")
    print(f"  F1:        {metrics['f1']:.3f}")
    print(f"  AUC:       {metrics['auc_roc']:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
