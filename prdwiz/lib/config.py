"""
Configuration for the PRD wizard.

Options come from an optional prd-wizard.yaml in the working directory,
overridden by whatever the caller (usually the CLI) passes explicitly.
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "prd-wizard.yaml"
DEFAULT_OUTPUT_DIR = "./tasks"
DEFAULT_BRANCH_PREFIX = "feat/"


@dataclass
class WizardOptions:
    """Options consumed by the wizard, generator and persistence layer."""
    cwd: Path = field(default_factory=Path.cwd)
    output_dir: str = DEFAULT_OUTPUT_DIR       # Relative to cwd, or absolute
    force: bool = False                        # Skip overwrite confirmation
    branch_prefix: str = DEFAULT_BRANCH_PREFIX


def load_wizard_config(cwd: Optional[Path] = None) -> WizardOptions:
    """Load prd-wizard.yaml from cwd and return WizardOptions.

    Missing file returns defaults. A malformed file logs a warning and
    returns defaults. Unknown keys are ignored.
    """
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    options = WizardOptions(cwd=cwd)

    config_path = cwd / CONFIG_FILENAME
    if not config_path.exists():
        return options

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse {config_path}: {e}")
        return options

    if data is None:
        return options
    if not isinstance(data, dict):
        logger.warning(f"Ignoring {config_path}: expected a mapping, got {type(data).__name__}")
        return options

    # Blank keys (YAML null) keep their defaults
    if data.get("output_dir") is not None:
        options.output_dir = str(data["output_dir"])
    if data.get("branch_prefix") is not None:
        options.branch_prefix = str(data["branch_prefix"])

    force = data.get("force")
    if isinstance(force, bool):
        options.force = force
    elif force is not None:
        logger.warning(f"Ignoring force={force!r} in {config_path}: expected true or false")

    return options


def apply_overrides(
    options: WizardOptions,
    output_dir: Optional[str] = None,
    force: Optional[bool] = None,
) -> WizardOptions:
    """Return a copy of options with explicitly provided values applied."""
    updates = {}
    if output_dir is not None:
        updates["output_dir"] = output_dir
    if force:
        updates["force"] = True
    return replace(options, **updates)
