"""Shared helpers for the Quai adapter."""
