"""Deposit domain: organization modes, planning and conflict policy."""

from .conflict import AskCallback, ConflictResolver
from .models import ConflictAction, DestinationPlan, OrganizeMode
from .planner import DepositPlanner

__all__ = [
    "AskCallback",
    "ConflictAction",
    "ConflictResolver",
    "DepositPlanner",
    "DestinationPlan",
    "OrganizeMode",
]
