"""Application pagination – page numbers and link fragments."""
from qsearch.application.pagination.fragments import SECTION_KEYS, split_fragments
from qsearch.application.pagination.page import current_page, total_pages

__all__ = ["SECTION_KEYS", "current_page", "split_fragments", "total_pages"]
