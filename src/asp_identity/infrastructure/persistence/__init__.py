"""Persistence implementations for the identity schema."""
