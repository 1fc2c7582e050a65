"""
POS Billing Ledger Engine
===========================
Append-only transaction history.
"""

from engines.ledger.services import TransactionLedger

__all__ = ["TransactionLedger"]
