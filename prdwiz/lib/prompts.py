"""
Terminal prompt primitives for the PRD wizard.

Plain input()/print() helpers: single-line text, yes/no confirmation and
numbered single-select. Ctrl+C and Ctrl+D raise PromptCancelled so callers
can treat an interrupt as a cancellation instead of a crash.
"""

from typing import Optional


class PromptCancelled(Exception):
    """User aborted a prompt (Ctrl+C or end of input)."""


def _read(display: str) -> str:
    try:
        return input(display)
    except (EOFError, KeyboardInterrupt):
        raise PromptCancelled() from None


def print_section(title: str) -> None:
    """Print a section header."""
    print(f"\n=== {title} ===\n")


def print_info(message: str) -> None:
    print(f"  {message}")


def print_success(message: str) -> None:
    print(f"  OK: {message}")


def print_error(message: str) -> None:
    print(f"  ERROR: {message}")


def prompt_text(
    message: str,
    required: bool = False,
    help: Optional[str] = None,
    default: str = "",
) -> str:
    """Prompt for a single line of text.

    Returns the stripped answer, or the default when the answer is empty.
    `required` only changes the label; an empty answer is returned as-is and
    the caller decides what it means.
    """
    if help:
        print(f"  ({help})")

    label = message
    if required:
        label += " (required)"
    if default:
        display = f"{label} [{default}]: "
    else:
        display = f"{label}: "

    value = _read(display).strip()
    return value if value else default


def prompt_bool(message: str, default: bool = False, help: Optional[str] = None) -> bool:
    """Prompt user for yes/no answer."""
    if help:
        print(f"  ({help})")

    default_str = "Y/n" if default else "y/N"
    value = _read(f"{message} [{default_str}]: ").strip().lower()
    if not value:
        return default
    return value in ("y", "yes", "true", "1")


def prompt_select(
    message: str,
    choices: list[tuple[str, str, str]],
    default: Optional[str] = None,
    help: Optional[str] = None,
) -> str:
    """Prompt user to select from numbered choices.

    Args:
        message: Prompt message
        choices: List of (value, label, description) tuples
        default: Value selected on empty input (first choice if None)
        help: Optional hint printed above the choices

    Returns:
        Selected value
    """
    values = [value for value, _, _ in choices]
    default_idx = values.index(default) + 1 if default in values else 1

    print(f"\n{message}")
    if help:
        print(f"  ({help})")
    for i, (_, label, desc) in enumerate(choices, 1):
        marker = "*" if i == default_idx else " "
        print(f"  {marker}{i}. {label} - {desc}")

    while True:
        selection = _read(f"Select [1-{len(choices)}, default={default_idx}]: ").strip()
        if not selection:
            return values[default_idx - 1]
        try:
            idx = int(selection)
        except ValueError:
            print("Please enter a valid number")
            continue
        if 1 <= idx <= len(choices):
            return values[idx - 1]
        print(f"Please enter a number between 1 and {len(choices)}")
