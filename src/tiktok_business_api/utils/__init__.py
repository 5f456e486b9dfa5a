"""Utility helpers for the TikTok Business API client."""

from .files import FilePart, calculate_md5, detect_content_type, file_signature
from .security import safe_log_dict, sanitize_headers, setup_secure_logging

__all__ = [
    "FilePart",
    "calculate_md5",
    "detect_content_type",
    "file_signature",
    "safe_log_dict",
    "sanitize_headers",
    "setup_secure_logging",
]
