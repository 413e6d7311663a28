"""Support ticket volume scoring component."""

import numpy as np
import pandas as pd

from .base import BaseScorer


class TicketScorer(BaseScorer):
    """
    Score based on support_tickets.

    Points:
    - >5 tickets: 0.15
    - 4-5 tickets: 0.10
    - <=3 tickets: 0
    """

    name = "tickets"

    @property
    def required_columns(self) -> list[str]:
        return ["support_tickets"]

    def score(self, df: pd.DataFrame) -> pd.Series:
        """Calculate support ticket contribution."""
        self.validate(df)
        tickets = df["support_tickets"]

        # Thresholds are ordered high to low (first match wins)
        conditions = []
        choices = []

        for min_tickets, points in self.config.ticket_thresholds:
            conditions.append(tickets > min_tickets)
            choices.append(points)

        return pd.Series(
            np.select(conditions, choices, default=self.config.ticket_default),
            index=df.index,
            dtype=float,
        )
