"""Cratchit: chart of accounts parsing and lookup."""
