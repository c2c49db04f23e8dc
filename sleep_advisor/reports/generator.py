"""
Report Generator — Downloadable Assessment Export

Serializes an ExportEnvelope (answers + analysis) to the JSON document
offered for download from the results view.

Constraints:
- Contract field names (camelCase) in the analysis section
- Pretty-printed, 2-space indent
- Download filename: sleepsense-analysis-{YYYY-MM-DD}.json (UTC date)
"""

import logging
from datetime import datetime

from sleep_advisor.rules.schemas import ExportEnvelope

logger = logging.getLogger(__name__)


JSON_MEDIA_TYPE = "application/json"


def generate_filename(timestamp: datetime, extension: str = "json") -> str:
    """
    Generate download filename following pattern: sleepsense-analysis-{YYYY-MM-DD}.ext
    """
    date_str = timestamp.strftime('%Y-%m-%d')
    return f"sleepsense-analysis-{date_str}.{extension}"


def generate_json_report(envelope: ExportEnvelope) -> str:
    """
    Render the export envelope as a JSON document.

    Args:
        envelope: Output of InferenceEngine.export_record()

    Returns:
        JSON text (UTF-8 safe, non-ASCII kept as-is)
    """
    content = envelope.model_dump_json(by_alias=True, indent=2)
    logger.debug(
        f"[Reports] Rendered export with "
        f"{len(envelope.analysis.recommendations)} recommendations ({len(content)} chars)"
    )
    return content
