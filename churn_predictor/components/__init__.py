"""Scoring components for churn prediction."""

from .base import BaseScorer
from .tenure import TenureScorer
from .contract import ContractScorer
from .charges import ChargesScorer
from .addons import AddOnScorer
from .tickets import TicketScorer
from .engagement import EngagementScorer
from .payment import PaymentScorer
from .internet import InternetScorer

__all__ = [
    "BaseScorer",
    "TenureScorer",
    "ContractScorer",
    "ChargesScorer",
    "AddOnScorer",
    "TicketScorer",
    "EngagementScorer",
    "PaymentScorer",
    "InternetScorer",
]
