"""Services Layer: listing store, interest ledger, submission protocol, dashboard projections.

Invariants:
    - Services own transactions (commit/rollback); core/ stays pure
    - Services raise LendShelfError subclasses; HTTP mapping lives in api/
"""
