"""
PRD generation from clarifying answers.

Turns the loosely structured interview answers into a GeneratedPrd: a name,
a filesystem-safe slug, a branch name and an ordered list of prioritized
user stories. Everything here is pure and deterministic; the same answers
always produce the same PRD.
"""

import logging
import re
import unicodedata
from typing import Optional

from prdwiz.lib.config import DEFAULT_BRANCH_PREFIX, WizardOptions
from prdwiz.pm.models import ClarifyingAnswers, GeneratedPrd, UserStory
from prdwiz.pm.questions import CLARIFYING_QUESTIONS

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 60
MAX_SLUG_LENGTH = 60
MAX_TITLE_LENGTH = 80
MAX_SCOPE_STORIES = 8
FALLBACK_NAME = "Untitled feature"
FALLBACK_SLUG = "prd"

# Scope items in these positions get priority 1, later ones priority 2
DEFAULT_HIGH_PRIORITY_COUNT = 3

HIGH_PRIORITY_PATTERN = re.compile(r"\b(must|critical|required|essential)\b", re.IGNORECASE)
LOW_PRIORITY_PATTERN = re.compile(r"\b(nice to have|optional|later|stretch)\b", re.IGNORECASE)

SENTENCE_END_PATTERN = re.compile(r"[.!?](?=\s|$)")
LIST_MARKER_PATTERN = re.compile(r"^(?:[-*+]+|\d+[.)])\s*")
ITEM_SEPARATOR_PATTERN = re.compile(r"[\n;,]+")

TRAILING_PUNCTUATION = " .!?,;:-"


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated, filename-safe slug.

    Example: "Add Dark-Mode Toggle!" -> "add-dark-mode-toggle"

    Never returns an empty string; text without any alphanumerics maps to
    FALLBACK_SLUG.
    """
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", ascii_text.lower()).strip("-")
    slug = slug[:MAX_SLUG_LENGTH].strip("-")
    return slug or FALLBACK_SLUG


def _truncate_words(text: str, limit: int) -> str:
    """Truncate text to at most limit characters, preferring a word boundary."""
    if len(text) <= limit:
        return text
    cut = text[:limit + 1]
    if " " in cut:
        cut = cut.rsplit(" ", 1)[0].rstrip(TRAILING_PUNCTUATION)
    # No usable word boundary: hard cut
    if not cut or len(cut) > limit:
        cut = text[:limit].rstrip(TRAILING_PUNCTUATION) or text[:limit]
    return cut


def _upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def _lower_first(text: str) -> str:
    # Leave acronyms alone: "API clients" stays, "Admins" -> "admins"
    if text[:2].isupper():
        return text
    return text[:1].lower() + text[1:]


def derive_feature_name(description: str) -> str:
    """Derive a short human-readable name from a feature description.

    Takes the first sentence of the first non-empty line. Applying this to
    its own output returns the same name.
    """
    lines = [line.strip() for line in description.splitlines() if line.strip()]
    first = lines[0] if lines else ""

    match = SENTENCE_END_PATTERN.search(first)
    if match:
        first = first[:match.start()]

    name = " ".join(first.split()).rstrip(TRAILING_PUNCTUATION)
    name = _truncate_words(name, MAX_NAME_LENGTH)

    if not name:
        name = _truncate_words(" ".join(description.split()), MAX_NAME_LENGTH)
    if not name:
        return FALLBACK_NAME

    return _upper_first(name)


def split_items(text: str, limit: Optional[int] = None) -> list[str]:
    """Split a free-text answer into distinct list items.

    Items are separated by new lines, semicolons or commas. Bullets and
    numbering are stripped; duplicates are dropped case-insensitively with
    the first occurrence kept.
    """
    items: list[str] = []
    seen: set[str] = set()
    for raw in ITEM_SEPARATOR_PATTERN.split(text):
        item = LIST_MARKER_PATTERN.sub("", raw.strip())
        item = " ".join(item.split()).rstrip(TRAILING_PUNCTUATION)
        key = item.lower()
        if not item or key in seen:
            continue
        seen.add(key)
        items.append(item)

    if limit is not None:
        return items[:limit]
    return items


def story_priority(item: str, position: int) -> int:
    """Priority for the scope item at the given 0-based position."""
    if HIGH_PRIORITY_PATTERN.search(item):
        return 1
    if LOW_PRIORITY_PATTERN.search(item):
        return 3
    return 1 if position < DEFAULT_HIGH_PRIORITY_COUNT else 2


def _story_description(user: str, capability: str, problem: str) -> str:
    text = f"As {user}, I want {_lower_first(capability)}."
    if problem:
        text += f" This addresses: {_lower_first(problem)}."
    return text


def _build_stories(name: str, answers: ClarifyingAnswers) -> list[UserStory]:
    users = split_items(answers.get("users"))
    user = _lower_first(users[0]) if users else "a user"
    problems = split_items(answers.get("problem"))
    problem = problems[0] if problems else ""

    drafts: list[tuple[str, int, str, tuple[str, ...]]] = []

    scope_items = split_items(answers.get("scope"), limit=MAX_SCOPE_STORIES)
    for position, item in enumerate(scope_items):
        title = _upper_first(_truncate_words(item, MAX_TITLE_LENGTH))
        drafts.append((
            title,
            story_priority(item, position),
            _story_description(user, item, problem),
            (f"{title} works as described", "Existing tests continue to pass"),
        ))

    if not drafts:
        drafts.append((
            name,
            1,
            _story_description(user, name, problem),
            (f"{name} works as described", "Existing tests continue to pass"),
        ))

    constraints = answers.get("constraints").strip()
    if constraints:
        drafts.append((
            "Respect technical constraints and integrations",
            2,
            f"The implementation honors the stated constraints: {' '.join(constraints.split())}",
            tuple(split_items(constraints)) or (constraints,),
        ))

    success_items = split_items(answers.get("success"))
    if success_items:
        drafts.append((
            "Verify success criteria",
            3,
            f"Confirm that {name} meets the agreed success criteria.",
            tuple(success_items),
        ))
    else:
        drafts.append((
            "Add automated tests",
            3,
            f"Cover {name} with automated tests.",
            ("Each user story is covered by an automated test",),
        ))

    return [
        UserStory(
            id=f"US-{i:03d}",
            title=title,
            priority=priority,
            description=description,
            acceptance_criteria=criteria,
        )
        for i, (title, priority, description, criteria) in enumerate(drafts, 1)
    ]


def generate_prd(answers: ClarifyingAnswers, options: Optional[WizardOptions] = None) -> GeneratedPrd:
    """Generate a PRD from collected answers.

    Missing or empty answers are tolerated; this never raises for
    well-formed ClarifyingAnswers.
    """
    branch_prefix = options.branch_prefix if options else DEFAULT_BRANCH_PREFIX

    name = derive_feature_name(answers.feature_description)
    slug = slugify(name)
    stories = _build_stories(name, answers)

    context = tuple(
        (question.question, answers.get(question.id).strip())
        for question in CLARIFYING_QUESTIONS
        if answers.get(question.id).strip()
    )

    prd = GeneratedPrd(
        name=name,
        slug=slug,
        branch_name=f"{branch_prefix}{slug}",
        user_stories=tuple(stories),
        description=" ".join(answers.feature_description.split()),
        context=context,
    )
    logger.debug(f"Generated PRD '{prd.name}' ({prd.slug}) with {len(stories)} stories")
    return prd
