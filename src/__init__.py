"""Personal finance ledger engine and dashboard."""
