from .csv_writer import write_bucket, write_buckets, write_summary

__all__ = ["write_bucket", "write_buckets", "write_summary"]
