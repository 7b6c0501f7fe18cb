"""Ballot Ledger - 時間窓で管理される複数選挙の台帳."""

__version__ = "0.1.0"
