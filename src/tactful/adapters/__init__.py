"""Adapters translating the domain model to and from external formats."""
