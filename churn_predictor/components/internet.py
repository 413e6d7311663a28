"""Internet service scoring component."""

import pandas as pd

from .base import BaseScorer


class InternetScorer(BaseScorer):
    """
    Score based on internet service.

    Fiber optic adds 0.05. Unknown services are coded as "No".
    """

    name = "internet"

    @property
    def required_columns(self) -> list[str]:
        return ["internet_service"]

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Map internet services to contributions."""
        self.validate(df)
        return self.points_for_codes(
            df["internet_service"],
            self.config.internet_codes,
            self.config.internet_points,
        )
