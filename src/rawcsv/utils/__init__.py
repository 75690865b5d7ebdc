"""Utility functions for rawcsv."""

from .detect_encoding import EncodingDetectError, detect_encoding

__all__ = ["detect_encoding", "EncodingDetectError"]
