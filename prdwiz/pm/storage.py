"""
File persistence for generated PRDs.

PRDs are stored in the configured output directory (default ./tasks):
  <output_dir>/prd-<slug>.md
  <output_dir>/prd.json        (after a successful tracker conversion)
"""

import json
import logging
from pathlib import Path
from typing import Optional

from prdwiz.lib.config import WizardOptions
from prdwiz.lib.validate import validate_before_write
from prdwiz.pm.generator import derive_feature_name, slugify

logger = logging.getLogger(__name__)


def resolve_output_dir(options: WizardOptions) -> Path:
    """Resolve the output directory against the working directory."""
    return (Path(options.cwd) / options.output_dir).resolve()


def markdown_filename(slug: str) -> str:
    return f"prd-{slug}.md"


def markdown_path_for(output_dir: Path, slug: str) -> Path:
    """Get the markdown PRD path for a slug."""
    return output_dir / markdown_filename(slug)


def ensure_directory(path: Path) -> None:
    """Create path and any missing parents. No-op if it already exists."""
    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Output path exists and is not a directory: {path}")
        return

    path.mkdir(parents=True, exist_ok=True)
    logger.info(f"Created output directory {path}")


def file_exists(path: Path) -> bool:
    return path.exists()


def write_file(path: Path, content: str) -> None:
    """Write content to path, replacing any existing file."""
    path.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {path}")


def write_prd_json(path: Path, document: dict) -> None:
    """Validate a tracker document and write it as JSON."""
    validate_before_write(document, "prd", path)
    write_file(path, json.dumps(document, indent=2) + "\n")


def prd_exists(feature_name: str, options: Optional[WizardOptions] = None) -> Optional[Path]:
    """Check if a PRD already exists for a feature.

    The path is derived from the feature name alone, so this works without
    a prior wizard run in the same process.

    Returns:
        Path to the markdown PRD if it exists, None otherwise
    """
    options = options or WizardOptions()
    slug = slugify(derive_feature_name(feature_name))
    md_path = markdown_path_for(resolve_output_dir(options), slug)

    if file_exists(md_path):
        return md_path
    return None
