"""Concurrency primitives."""

from ballot_ledger.infrastructure.concurrency.ledger_lock import LedgerLock


__all__ = ["LedgerLock"]
