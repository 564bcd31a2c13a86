"""REST facade over the core banking ledger."""
