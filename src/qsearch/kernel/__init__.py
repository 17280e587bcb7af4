"""Kernel – error taxonomy and model schema descriptors."""
