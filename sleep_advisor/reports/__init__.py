"""
Reports Module — Auditable Output Generation

Public API:
- generate_json_report: Export document (answers + analysis) as JSON
- generate_filename: Download filename pattern
"""

from .generator import (
    generate_json_report,
    generate_filename,
    JSON_MEDIA_TYPE,
)

__all__ = [
    "generate_json_report",
    "generate_filename",
    "JSON_MEDIA_TYPE",
]
