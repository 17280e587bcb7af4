"""Adapters – concrete stores and schema registries."""
