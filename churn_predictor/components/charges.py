"""Monthly charges scoring component."""

import numpy as np
import pandas as pd

from .base import BaseScorer


class ChargesScorer(BaseScorer):
    """
    Score based on monthly_charges.

    Points:
    - >80: 0.15
    - 60-80: 0.10
    - <=60: 0
    """

    name = "charges"

    @property
    def required_columns(self) -> list[str]:
        return ["monthly_charges"]

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Calculate monthly charges contribution."""
        self.validate(df)
        charges = df["monthly_charges"]

        # Thresholds are ordered high to low (first match wins)
        conditions = []
        choices = []

        for min_charge, points in self.config.charges_thresholds:
            conditions.append(charges > min_charge)
            choices.append(points)

        return pd.Series(
            np.select(conditions, choices, default=self.config.charges_default),
            index=df.index,
            dtype=float,
        )
