"""Personal banking ledger: accounts, transfers and admin management."""

__version__ = "0.1.0"
