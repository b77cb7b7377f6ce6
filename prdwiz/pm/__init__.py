"""
PM (Project Management) module for prdwiz.

Handles clarifying-question collection, PRD generation, markdown rendering,
tracker conversion and persistence of generated PRDs.
"""

from prdwiz.pm.models import (
    ClarifyingAnswers,
    ClarifyingQuestion,
    ConversionResult,
    GeneratedPrd,
    PrdGenerationResult,
    TrackerFormat,
    UserStory,
)
from prdwiz.pm.questions import CLARIFYING_QUESTIONS
from prdwiz.pm.generator import generate_prd, slugify
from prdwiz.pm.render import render_prd_markdown
from prdwiz.pm.convert import convert_to_tracker_format, to_prd_json
from prdwiz.pm.storage import prd_exists
from prdwiz.pm.wizard import PrdWizard, run_prd_wizard

__all__ = [
    "ClarifyingAnswers",
    "ClarifyingQuestion",
    "ConversionResult",
    "GeneratedPrd",
    "PrdGenerationResult",
    "TrackerFormat",
    "UserStory",
    "CLARIFYING_QUESTIONS",
    "generate_prd",
    "slugify",
    "render_prd_markdown",
    "convert_to_tracker_format",
    "to_prd_json",
    "prd_exists",
    "PrdWizard",
    "run_prd_wizard",
]
