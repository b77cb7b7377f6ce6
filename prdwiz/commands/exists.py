"""
prd exists - Check whether a PRD was already generated for a feature.
"""

from pathlib import Path

from prdwiz.lib.config import apply_overrides, load_wizard_config
from prdwiz.pm.storage import prd_exists


def cmd_exists(args) -> int:
    """Print the PRD path and return 0 if it exists, else return 1."""
    cwd = Path(args.cwd).resolve() if args.cwd else Path.cwd()
    options = apply_overrides(load_wizard_config(cwd), output_dir=args.output_dir)

    path = prd_exists(args.feature, options)
    if path is None:
        print(f"No PRD found for '{args.feature}'")
        return 1

    print(path)
    return 0
