"""Indexes bounded context: application layer."""
