"""Shared helpers: errors, character tables, span utilities and logging."""
