"""Transaction categorization utilities.

This package provides deterministic, local categorization of M-Pesa
transactions from their counterparty, description, amount and direction. It
is intentionally rule-based (no network calls) so every decision can be
traced back to a keyword group.
"""

from .classifier import Decision, TransactionDraft, classify, explain
from .defaults import DEFAULT_CATEGORIES

__all__ = ["DEFAULT_CATEGORIES", "Decision", "TransactionDraft", "classify", "explain"]
