"""Custody & identity ledger for facility records."""
