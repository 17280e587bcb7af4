"""Testing fakes – in-memory doubles for the store port."""
from qsearch.testing.fakes.store import RecordingStore, StoreCall

__all__ = ["RecordingStore", "StoreCall"]
