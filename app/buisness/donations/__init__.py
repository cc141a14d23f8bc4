"""
Donation ledger business layer.

Main entry point: DonationLedgerContext (domain facade)

- DonationLedgerContext: one ledger transaction per operation
- EnrollmentManager: donors, NPOs, recipients, needs
- AssetLifecycleManager: propose / approve / borrow / give / get back / delete
- AssetStateMachine, NeedStateMachine: allowed status transitions
- Policies: ownership, id uniqueness, need matching, relationship integrity
- RelationshipManager: id-list bookkeeping
- LedgerInvoker: named-command surface over the context and query service
- DonationNarrator: lifecycle log lines

Modules are imported directly (app.buisness.donations.context, ...) so the
ledger layer can depend on app.buisness.donations.errors without a cycle.
"""
