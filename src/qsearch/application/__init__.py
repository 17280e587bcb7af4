"""Application – query translation and pagination."""
