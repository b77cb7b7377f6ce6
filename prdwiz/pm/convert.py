"""
Conversion of generated PRDs into tracker formats.

Each TrackerFormat maps to a handler. Handlers build the document and its
target path but never touch the filesystem; persisting the document is the
caller's job.
"""

import logging
from pathlib import Path
from typing import Callable, Union

from prdwiz.pm.models import ConversionResult, GeneratedPrd, TrackerFormat

logger = logging.getLogger(__name__)

TRACKER_JSON_FILENAME = "prd.json"

BEADS_NOT_IMPLEMENTED = "Beads format conversion is not yet implemented. Use bd create manually."


def to_prd_json(prd: GeneratedPrd) -> dict:
    """Build the prd.json tracker document for a PRD."""
    return {
        "name": prd.name,
        "description": prd.description,
        "branchName": prd.branch_name,
        "slug": prd.slug,
        "sourcePrd": f"prd-{prd.slug}.md",
        "userStories": [
            {
                "id": story.id,
                "title": story.title,
                "description": story.description,
                "acceptanceCriteria": list(story.acceptance_criteria),
                "priority": story.priority,
                "passes": False,
                "notes": "",
            }
            for story in prd.user_stories
        ],
    }


def _convert_json(prd: GeneratedPrd, output_dir: Path) -> ConversionResult:
    return ConversionResult(
        success=True,
        format=TrackerFormat.JSON,
        path=output_dir / TRACKER_JSON_FILENAME,
        document=to_prd_json(prd),
    )


def _convert_beads(prd: GeneratedPrd, output_dir: Path) -> ConversionResult:
    return ConversionResult(
        success=False,
        format=TrackerFormat.BEADS,
        error=BEADS_NOT_IMPLEMENTED,
    )


CONVERTERS: dict[TrackerFormat, Callable[[GeneratedPrd, Path], ConversionResult]] = {
    TrackerFormat.JSON: _convert_json,
    TrackerFormat.BEADS: _convert_beads,
}


def convert_to_tracker_format(
    prd: GeneratedPrd,
    format: Union[TrackerFormat, str],
    output_dir: Path,
) -> ConversionResult:
    """Convert a PRD to the given tracker format.

    Unknown formats produce a failed result instead of raising.
    """
    try:
        tracker_format = TrackerFormat(format)
    except ValueError:
        logger.warning(f"Unknown tracker format requested: {format!r}")
        return ConversionResult(success=False, format=format, error=f"Unknown format: {format}")

    result = CONVERTERS[tracker_format](prd, Path(output_dir))
    if not result.success:
        logger.info(f"Conversion to {tracker_format.value} failed: {result.error}")
    return result
