"""Deposit step use cases."""

from .deposit_runner import DepositRunner

__all__ = ["DepositRunner"]
