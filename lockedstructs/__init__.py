"""Thread-safe account, blocking list, bucket-locked hash table and thread helpers."""

__version__ = "2024.1"

__all__ = ["account", "blocking_list", "hash_table", "threads"]