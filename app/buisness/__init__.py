"""
Domain layer for the donation ledger.
Contains business rules, state machines and the ledger unit of work,
separated from data persistence concerns.
"""
