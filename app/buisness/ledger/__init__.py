"""
Ledger access layer.

- LedgerAdapter: key/value, range, kind and history access to the ledger tables
- LedgerTransaction: working copy + single commit for one operation
- RecordRepository / LedgerRepositories: typed per-kind access
"""
