"""Add-on services scoring component."""

import pandas as pd

from .base import BaseScorer


class AddOnScorer(BaseScorer):
    """
    Score based on missing add-on services.

    Online security and tech support each add their own
    contribution when absent; the two are independent.

    Points:
    - no online security: 0.08
    - no tech support: 0.08
    """

    name = "addons"

    @property
    def required_columns(self) -> list[str]:
        return ["online_security", "tech_support"]

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Calculate add-on services contribution."""
        self.validate(df)
        no_security = ~df["online_security"].astype(bool)
        no_support = ~df["tech_support"].astype(bool)

        return (
            no_security.astype(float) * self.config.online_security_points
            + no_support.astype(float) * self.config.tech_support_points
        )
