"""
Complaint data-quality pipeline.

Validates, normalizes and deduplicates spreadsheet rows describing legal
complaints against mortgage lenders, and rolls the cleaned records up into
dashboard analytics.
"""

__version__ = "0.1.0"
