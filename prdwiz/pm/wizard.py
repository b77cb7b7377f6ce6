"""PRD wizard orchestration using transitions library.

Sequences collection, generation, persistence and tracker conversion as an
explicit state machine. Every run ends in exactly one terminal state, and
each terminal state maps to one PrdGenerationResult shape:

- done: markdown written (success=True), json_path only if conversion worked
- cancelled: user aborted before anything was written (prd attached if generated)
- failed: unexpected error (error message, prd attached if generated)

Usage:
    from prdwiz.pm.wizard import run_prd_wizard

    result = run_prd_wizard(WizardOptions(output_dir="./tasks"))
"""

import logging
from pathlib import Path
from typing import Optional, Union

from transitions import Machine

from prdwiz.lib import prompts
from prdwiz.lib.config import WizardOptions, load_wizard_config
from prdwiz.lib.validate import ValidationError
from prdwiz.pm.collector import collect_answers
from prdwiz.pm.convert import convert_to_tracker_format
from prdwiz.pm.generator import generate_prd
from prdwiz.pm.models import GeneratedPrd, PrdGenerationResult, TrackerFormat
from prdwiz.pm.render import render_prd_markdown
from prdwiz.pm import storage

logger = logging.getLogger(__name__)


STATES = [
    "start",
    "collecting",
    "generating",
    "checking_existing_file",
    "confirm_overwrite",
    "writing_markdown",
    "prompting_conversion",
    "converting",
    "done",
    "cancelled",
    "failed",
]

TERMINAL_STATES = ["done", "cancelled", "failed"]
ACTIVE_STATES = [s for s in STATES if s not in TERMINAL_STATES]

# Each trigger becomes a method on the wizard
TRANSITIONS = [
    {"trigger": "begin", "source": "start", "dest": "collecting"},
    {"trigger": "answers_collected", "source": "collecting", "dest": "generating"},
    {"trigger": "generated", "source": "generating", "dest": "checking_existing_file"},

    # Existing file: ask before overwriting unless forced
    {"trigger": "found_existing", "source": "checking_existing_file", "dest": "confirm_overwrite"},
    {"trigger": "write_markdown", "source": "checking_existing_file", "dest": "writing_markdown"},
    {"trigger": "write_markdown", "source": "confirm_overwrite", "dest": "writing_markdown"},

    {"trigger": "markdown_written", "source": "writing_markdown", "dest": "prompting_conversion"},
    {"trigger": "start_conversion", "source": "prompting_conversion", "dest": "converting"},

    # Conversion is optional and its failure is not fatal
    {"trigger": "finish", "source": "prompting_conversion", "dest": "done"},
    {"trigger": "finish", "source": "converting", "dest": "done"},

    # Abort paths, from any non-terminal state
    {"trigger": "cancel", "source": ACTIVE_STATES, "dest": "cancelled"},
    {"trigger": "fail", "source": ACTIVE_STATES, "dest": "failed"},
]

CONVERSION_CHOICES = [
    ("json", "prd.json", "JSON tracker format"),
    ("beads", "Beads (coming soon)", "Create beads issues from stories"),
]


def display_prd_summary(prd: GeneratedPrd) -> None:
    """Print a short summary of a generated PRD."""
    prompts.print_section("Generated PRD Summary")

    print(f"  Feature:     {prd.name}")
    print(f"  Branch:      {prd.branch_name}")
    print(f"  Stories:     {len(prd.user_stories)}")
    print()

    print("  User Stories:")
    for story in prd.user_stories:
        print(f"    [P{story.priority}] {story.id}: {story.title}")


def prompt_for_conversion() -> Optional[Union[TrackerFormat, str]]:
    """Ask whether to convert, and to which format. None means skip."""
    want_convert = prompts.prompt_bool(
        "Would you like to also generate a tracker-compatible format?",
        default=True,
        help="Generate prd.json for your task tracker",
    )
    if not want_convert:
        return None

    return prompts.prompt_select(
        "Which tracker format?",
        CONVERSION_CHOICES,
        default="json",
        help="Select the target issue tracker format",
    )


def print_next_steps(prd: GeneratedPrd, markdown_path: Path, json_path: Optional[Path]) -> None:
    prompts.print_section("Next Steps")

    print("  1. Review the generated PRD")
    print(f"     {markdown_path}")
    print()

    if json_path:
        print("  2. Hand the tracker document to your task runner:")
        print(f"     {json_path}")
    else:
        print("  2. Generate a tracker document by re-running the wizard:")
        print("     prd create --force")

    print()
    print("  3. Create the feature branch:")
    print(f"     git checkout -b {prd.branch_name}")
    print()


class PrdWizard:
    """Interactive PRD creation wizard.

    Wraps the transitions library with wizard-specific logic:
    - Logs all transitions
    - Catches cancellation and failures once, at run()
    - Never raises; every run returns a PrdGenerationResult
    """

    def __init__(self, options: Optional[WizardOptions] = None):
        self.options = options or WizardOptions()
        self.output_dir = storage.resolve_output_dir(self.options)
        self.prd: Optional[GeneratedPrd] = None
        self.markdown_path: Optional[Path] = None
        self.json_path: Optional[Path] = None

        self.machine = Machine(
            model=self,
            states=STATES,
            transitions=TRANSITIONS,
            initial="start",
            auto_transitions=False,  # Only explicit transitions
            send_event=True,  # Pass EventData to callbacks
            after_state_change="on_state_change",
        )

    def on_state_change(self, event) -> None:
        """Callback after any state transition."""
        logger.info(
            f"[WIZARD] {event.transition.source} -> {event.transition.dest} ({event.event.name})"
        )

    def run(self) -> PrdGenerationResult:
        """Run the wizard to completion."""
        print()
        prompts.print_section("PRD Creator")
        prompts.print_info("This wizard will help you create a Product Requirements Document.")
        prompts.print_info("Press Ctrl+C at any time to cancel.")

        try:
            return self._run()
        except (prompts.PromptCancelled, KeyboardInterrupt):
            print()
            return self._interrupted()
        except Exception as e:
            logger.exception("PRD wizard failed")
            if self.state in ACTIVE_STATES:
                self.fail()
            return PrdGenerationResult(
                success=False,
                error=str(e) or type(e).__name__,
                prd=self.prd,
            )

    def _run(self) -> PrdGenerationResult:
        self.begin()
        answers = collect_answers()
        if answers is None:
            self.cancel()
            prompts.print_info("PRD creation cancelled.")
            return PrdGenerationResult(success=False, cancelled=True)
        self.answers_collected()

        prompts.print_section("Generating PRD")
        self.prd = generate_prd(answers, self.options)
        markdown = render_prd_markdown(self.prd)
        display_prd_summary(self.prd)
        self.generated()

        storage.ensure_directory(self.output_dir)
        md_path = storage.markdown_path_for(self.output_dir, self.prd.slug)

        if not self.options.force and storage.file_exists(md_path):
            self.found_existing()
            overwrite = prompts.prompt_bool(
                f"File {md_path.name} already exists. Overwrite?",
                default=False,
            )
            if not overwrite:
                self.cancel()
                prompts.print_info("Aborted. PRD not saved.")
                return PrdGenerationResult(success=False, cancelled=True, prd=self.prd)

        self.write_markdown()
        storage.write_file(md_path, markdown)
        self.markdown_path = md_path
        prompts.print_success(f"PRD saved to: {md_path}")
        self.markdown_written()

        tracker_format = prompt_for_conversion()
        if tracker_format is not None:
            self.start_conversion()
            self._convert(tracker_format)

        self.finish()
        return self._done()

    def _convert(self, tracker_format: Union[TrackerFormat, str]) -> None:
        """Convert and persist; failures are reported, never raised."""
        prompts.print_section("Converting to Tracker Format")

        result = convert_to_tracker_format(self.prd, tracker_format, self.output_dir)
        if not result.success:
            prompts.print_error(result.error)
            return

        try:
            storage.write_prd_json(result.path, result.document)
        except (OSError, ValidationError) as e:
            logger.warning(f"Failed to write {result.path}: {e}")
            prompts.print_error(f"Could not write {result.path}: {e}")
            return

        self.json_path = result.path
        prompts.print_success(f"Created: {result.path}")

    def _interrupted(self) -> PrdGenerationResult:
        # Once the markdown is on disk the run counts as done; only the
        # optional conversion was skipped.
        if self.markdown_path is not None:
            logger.info("Interrupted after markdown was written, skipping conversion")
            if self.state == "writing_markdown":
                self.markdown_written()
            if self.state == "done":
                return self._result()
            self.finish()
            return self._done()

        logger.info("PRD creation cancelled by user")
        if self.state in ACTIVE_STATES:
            self.cancel()
            prompts.print_info("PRD creation cancelled.")
        return PrdGenerationResult(success=False, cancelled=True, prd=self.prd)

    def _done(self) -> PrdGenerationResult:
        print_next_steps(self.prd, self.markdown_path, self.json_path)
        return self._result()

    def _result(self) -> PrdGenerationResult:
        return PrdGenerationResult(
            success=True,
            markdown_path=self.markdown_path,
            json_path=self.json_path,
            prd=self.prd,
        )


def run_prd_wizard(options: Optional[WizardOptions] = None) -> PrdGenerationResult:
    """Run the interactive PRD creation wizard.

    Options default to prd-wizard.yaml in the current directory, if any.
    """
    return PrdWizard(options or load_wizard_config()).run()
