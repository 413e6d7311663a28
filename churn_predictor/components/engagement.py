"""Product engagement scoring component."""

import numpy as np
import pandas as pd

from .base import BaseScorer


class EngagementScorer(BaseScorer):
    """
    Score based on engagement_score (0-100).

    Points:
    - <30: 0.20
    - 30-49: 0.12
    - 50-69: 0.05
    - 70+: 0
    """

    name = "engagement"

    @property
    def required_columns(self) -> list[str]:
        return ["engagement_score"]

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Calculate engagement contribution."""
        self.validate(df)
        engagement = df["engagement_score"]

        conditions = []
        choices = []

        for max_engagement, points in self.config.engagement_thresholds:
            conditions.append(engagement < max_engagement)
            choices.append(points)

        return pd.Series(
            np.select(conditions, choices, default=self.config.engagement_default),
            index=df.index,
            dtype=float,
        )
