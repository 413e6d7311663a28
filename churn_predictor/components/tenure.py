"""Account tenure scoring component."""

import numpy as np
import pandas as pd

from .base import BaseScorer


class TenureScorer(BaseScorer):
    """
    Score based on tenure_months (account age).

    New accounts have not yet built a habit around the service
    and leave most often.

    Points:
    - <6 months: 0.25
    - 6-11 months: 0.15
    - 12-23 months: 0.05
    - 24+ months: 0
    """

    name = "tenure"

    @property
    def required_columns(self) -> list[str]:
        return ["tenure_months"]

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Calculate tenure contribution."""
        self.validate(df)
        tenure = df["tenure_months"]

        # Build conditions from thresholds (first match wins)
        conditions = []
        choices = []

        for max_months, points in self.config.tenure_thresholds:
            conditions.append(tenure < max_months)
            choices.append(points)

        return pd.Series(
            np.select(conditions, choices, default=self.config.tenure_default),
            index=df.index,
            dtype=float,
        )
