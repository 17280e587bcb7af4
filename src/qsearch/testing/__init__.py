"""Testing support – fakes for the search ports."""

from qsearch.testing.fakes import RecordingStore, StoreCall

__all__ = ["RecordingStore", "StoreCall"]
