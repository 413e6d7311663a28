"""
Scoring configuration for churn prediction model.

All rule thresholds, contributions and category codes are defined here
for easy tuning. Each rule group is an ordered list of
(threshold, contribution) entries evaluated first-match-wins by its
scoring component; the comparison direction belongs to the component.

Total max raw score: 1.26
- Tenure: 0-0.25
- Contract: 0-0.20
- Monthly Charges: 0-0.15
- Add-on Services: 0-0.16
- Support Tickets: 0-0.15
- Engagement: 0-0.20
- Payment Method: 0-0.10
- Internet Service: 0-0.05
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd
import yaml


@dataclass
class ScoringConfig:
    """
    Configuration for all scoring components.

    Load overrides from YAML:
        config = ScoringConfig.from_yaml("configs/strict.yaml")

    Create programmatically:
        config = ScoringConfig(churn_threshold=0.4)
    """

    # === Tenure (0-0.25) ===
    # tenure_months < threshold, first match wins
    tenure_thresholds: List[Tuple[int, float]] = field(default_factory=lambda: [
        (6, 0.25),    # <6 months: brand new
        (12, 0.15),   # 6-11 months: first year
        (24, 0.05),   # 12-23 months: second year
        # 24+: 0 (established)
    ])
    tenure_default: float = 0.0

    # === Contract (0-0.20) ===
    contract_codes: Dict[str, int] = field(default_factory=lambda: {
        "Month-to-month": 0,
        "One year": 1,
        "Two year": 2,
    })
    contract_points: Dict[int, float] = field(default_factory=lambda: {
        0: 0.20,   # Month-to-month: no commitment
        1: 0.10,   # One year
        2: 0.0,    # Two year
    })

    # === Monthly Charges (0-0.15) ===
    # monthly_charges > threshold, first match wins
    charges_thresholds: List[Tuple[float, float]] = field(default_factory=lambda: [
        (80.0, 0.15),
        (60.0, 0.10),
    ])
    charges_default: float = 0.0

    # === Add-on Services (0-0.16) ===
    # Added when the service is absent
    online_security_points: float = 0.08
    tech_support_points: float = 0.08

    # === Support Tickets (0-0.15) ===
    # support_tickets > threshold, first match wins
    ticket_thresholds: List[Tuple[int, float]] = field(default_factory=lambda: [
        (5, 0.15),
        (3, 0.10),
    ])
    ticket_default: float = 0.0

    # === Engagement (0-0.20) ===
    # engagement_score < threshold, first match wins
    engagement_thresholds: List[Tuple[float, float]] = field(default_factory=lambda: [
        (30.0, 0.20),
        (50.0, 0.12),
        (70.0, 0.05),
    ])
    engagement_default: float = 0.0

    # === Payment Method (0-0.10) ===
    payment_codes: Dict[str, int] = field(default_factory=lambda: {
        "Electronic check": 0,
        "Mailed check": 1,
        "Bank transfer": 2,
        "Credit card": 3,
    })
    payment_points: Dict[int, float] = field(default_factory=lambda: {
        0: 0.10,   # Electronic check
    })

    # === Internet Service (0-0.05) ===
    internet_codes: Dict[str, int] = field(default_factory=lambda: {
        "No": 0,
        "DSL": 1,
        "Fiber optic": 2,
    })
    internet_points: Dict[int, float] = field(default_factory=lambda: {
        2: 0.05,   # Fiber optic
    })

    # Unrecognized category values are coded as the first category
    unknown_category_code: int = 0

    # === Probability ===
    min_probability: float = 0.0
    max_probability: float = 0.99
    churn_threshold: float = 0.5
    decimals: int = 4

    # === Risk Level Categorization ===
    # Half-open [low, high) probability ranges
    risk_levels: Dict[str, Tuple[float, float]] = field(default_factory=lambda: {
        "Low": (0.0, 0.30),
        "Medium": (0.30, 0.60),
        "High": (0.60, 1.0),
    })

    # === Confidence placeholder ===
    # Drawn uniformly per prediction; unrelated to the probability
    confidence_range: Tuple[float, float] = (0.85, 0.95)

    # === Metadata ===
    model_version: str = "v1.0"

    def get_risk_level(self, probability: float) -> str:
        """Map a churn probability to its risk level."""
        for level, (low, high) in self.risk_levels.items():
            if low <= probability < high:
                return level
        return "Unknown"

    def get_risk_levels(self, probabilities: pd.Series) -> pd.Series:
        """Vectorized get_risk_level."""
        levels = list(self.risk_levels)
        conditions = [
            (probabilities >= low) & (probabilities < high)
            for low, high in self.risk_levels.values()
        ]
        return pd.Series(
            np.select(conditions, levels, default="Unknown"),
            index=probabilities.index,
            dtype=object,
        )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "ScoringConfig":
        """Load configuration from YAML file. Missing keys keep defaults."""
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        """Convert to plain dictionary (tuples become lists)."""
        return _plain(asdict(self))


def _plain(value):
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


# Default configuration instance
DEFAULT_CONFIG = ScoringConfig()
