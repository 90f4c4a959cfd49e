"""
Batch processing: quality pipeline orchestration and row readers.
"""

from .pipeline import QualityPipeline, process_rows_with_quality_checks

__all__ = [
    "QualityPipeline",
    "process_rows_with_quality_checks",
]
