"""Domain layer for lumibiz application."""

from lumibiz.domain.records import RecordService
from lumibiz.domain.summary import SummaryService

__all__ = [
    "RecordService",
    "SummaryService",
]
