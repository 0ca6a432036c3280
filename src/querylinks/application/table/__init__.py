"""Application table – sortable column header descriptors."""
from querylinks.application.table.headers import Column, HeaderCell, build_table_headers

__all__ = ["Column", "HeaderCell", "build_table_headers"]
