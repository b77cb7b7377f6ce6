"""
Clarifying questions asked after the feature description.

Order matters: it drives the narrative of the interview and the (i/N)
numbering shown to the user.
"""

from typing import Optional

from prdwiz.pm.models import ClarifyingQuestion

CLARIFYING_QUESTIONS: tuple[ClarifyingQuestion, ...] = (
    ClarifyingQuestion(
        id="problem",
        question="What problem does this feature solve?",
        follow_up="Who runs into this problem, and how often?",
    ),
    ClarifyingQuestion(
        id="users",
        question="Who are the primary users of this feature?",
        follow_up="What are they trying to accomplish?",
    ),
    ClarifyingQuestion(
        id="scope",
        question=(
            "What must the feature be able to do? "
            "List the core capabilities, separated by commas or new lines."
        ),
        follow_up="Any secondary capabilities worth listing?",
    ),
    ClarifyingQuestion(
        id="success",
        question="How will you know the feature works? List the checks a tester would run.",
        follow_up="What would a tester check first?",
    ),
    ClarifyingQuestion(
        id="constraints",
        question="Are there technical constraints or integrations to respect?",
        follow_up="Which existing systems must it work with?",
    ),
    ClarifyingQuestion(
        id="non_goals",
        question="What is explicitly out of scope?",
    ),
)


def get_question(question_id: str) -> Optional[ClarifyingQuestion]:
    """Look up a catalog question by id."""
    for question in CLARIFYING_QUESTIONS:
        if question.id == question_id:
            return question
    return None
