"""
Record reconciliation package for source vs destination ETL verification.

This package provides modular components for:
- Reading CSV and DBF record sets
- Indexing the destination set by a key field
- Classifying source records into match/mismatch buckets
- Writing one CSV file per bucket plus a run summary
"""

__version__ = "1.0.0"
