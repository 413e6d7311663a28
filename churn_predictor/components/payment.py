"""Payment method scoring component."""

import pandas as pd

from .base import BaseScorer


class PaymentScorer(BaseScorer):
    """
    Score based on payment method.

    Electronic check is the only method that adds risk (0.10).
    Unknown methods are coded as Electronic check.
    """

    name = "payment"

    @property
    def required_columns(self) -> list[str]:
        return ["payment_method"]

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Map payment methods to contributions."""
        self.validate(df)
        return self.points_for_codes(
            df["payment_method"],
            self.config.payment_codes,
            self.config.payment_points,
        )
