"""ORM models for the ledger store."""
