"""Algorithms over integer sequences: compaction, merging, partitioning, scans, counting and grid walks."""

__version__ = "0.1.0"
__all__ = ["counting", "grid", "inplace", "partition", "scan"]