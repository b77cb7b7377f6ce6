"""
prd create - Run the interactive PRD wizard.

Writes tasks/prd-<slug>.md and, optionally, tasks/prd.json.
"""

from pathlib import Path

from prdwiz.lib.config import apply_overrides, load_wizard_config
from prdwiz.pm.models import PrdGenerationResult
from prdwiz.pm.wizard import PrdWizard

EXIT_SUCCESS = 0
EXIT_CANCELLED = 1
EXIT_FAILED = 2


def exit_code_for(result: PrdGenerationResult) -> int:
    """Map a wizard result to a process exit code."""
    if result.success:
        return EXIT_SUCCESS
    if result.cancelled:
        return EXIT_CANCELLED
    return EXIT_FAILED


def cmd_create(args) -> int:
    """Run the wizard with options from prd-wizard.yaml and CLI flags."""
    cwd = Path(args.cwd).resolve() if args.cwd else Path.cwd()
    options = apply_overrides(
        load_wizard_config(cwd),
        output_dir=args.output_dir,
        force=args.force,
    )

    result = PrdWizard(options).run()

    if not result.success and not result.cancelled:
        print(f"ERROR: {result.error}")

    return exit_code_for(result)
