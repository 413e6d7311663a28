"""Base class for scoring components."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict

import pandas as pd

if TYPE_CHECKING:
    from ..config import ScoringConfig


class BaseScorer(ABC):
    """
    Abstract base class for scoring components.

    Each component calculates the contribution of a single rule group
    to the churn probability using vectorized pandas operations.
    """

    name: str = "base"

    def __init__(self, config: "ScoringConfig"):
        """
        Initialize scorer with configuration.

        Args:
            config: ScoringConfig instance with thresholds and contributions
        """
        self.config = config

    @abstractmethod
    def score(self, df: pd.DataFrame) -> pd.Series:
        """
        Calculate component contribution for all rows.

        Must be implemented by subclasses using vectorized operations.

        Args:
            df: DataFrame with required columns

        Returns:
            Series of float contributions
        """
        pass

    @property
    @abstractmethod
    def required_columns(self) -> list[str]:
        """List of columns required by this scorer."""
        pass

    def validate(self, df: pd.DataFrame) -> None:
        """Validate required columns exist."""
        missing = set(self.required_columns) - set(df.columns)
        if missing:
            raise ValueError(
                f"{self.__class__.__name__} requires columns: {missing}"
            )

    def encode(self, values: pd.Series, codes: Dict[str, int]) -> pd.Series:
        """
        Map category labels to their numeric codes.

        Labels missing from the mapping get config.unknown_category_code.
        """
        return (
            values.map(codes)
            .fillna(self.config.unknown_category_code)
            .astype(int)
        )

    def points_for_codes(
        self, values: pd.Series, codes: Dict[str, int], points: Dict[int, float]
    ) -> pd.Series:
        """Encode a categorical column and look up each code's contribution."""
        return (
            self.encode(values, codes)
            .map(points)
            .fillna(0.0)
            .astype(float)
        )
