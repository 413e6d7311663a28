"""Contract type scoring component."""

import pandas as pd

from .base import BaseScorer


class ContractScorer(BaseScorer):
    """
    Score based on contract type.

    Month-to-month customers can leave at any time.
    Unknown contract types are coded as Month-to-month.

    Points:
    - Month-to-month: 0.20
    - One year: 0.10
    - Two year: 0
    """

    name = "contract"

    @property
    def required_columns(self) -> list[str]:
        return ["contract_type"]

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Map contract types to contributions."""
        self.validate(df)
        return self.points_for_codes(
            df["contract_type"],
            self.config.contract_codes,
            self.config.contract_points,
        )
