"""
Interactive collection of the feature description and clarifying answers.
"""

import logging
from typing import Optional, Sequence

from prdwiz.lib import prompts
from prdwiz.pm.models import ClarifyingAnswers, ClarifyingQuestion
from prdwiz.pm.questions import CLARIFYING_QUESTIONS

logger = logging.getLogger(__name__)

# Answers shorter than this trigger the question's follow-up prompt
BRIEF_ANSWER_THRESHOLD = 20


def ask_question(question: ClarifyingQuestion) -> str:
    """Ask one catalog question, with at most one follow-up for brief answers."""
    answer = prompts.prompt_text(question.question, required=False, help=question.follow_up)

    if answer and len(answer) < BRIEF_ANSWER_THRESHOLD and question.follow_up:
        more_detail = prompts.prompt_text(question.follow_up, required=False)
        if more_detail:
            return f"{answer}. {more_detail}"

    return answer


def collect_answers(
    questions: Sequence[ClarifyingQuestion] = CLARIFYING_QUESTIONS,
) -> Optional[ClarifyingAnswers]:
    """Collect the feature description and an answer to every question.

    Returns None when no feature description is given; no question is asked
    in that case. Skipped questions are recorded as empty strings.
    """
    prompts.print_section("Feature Description")
    prompts.print_info("Describe the feature you want to build.")
    prompts.print_info("Be as detailed as you like - this will help generate a better PRD.")
    print()

    feature_description = prompts.prompt_text(
        "What feature do you want to build?",
        required=True,
        help="Describe the feature in 1-3 sentences",
    )
    if not feature_description:
        logger.info("No feature description given, aborting collection")
        return None

    prompts.print_section("Clarifying Questions")
    prompts.print_info(f"Let me ask {len(questions)} questions to better understand your needs.")

    answers: dict[str, str] = {}
    for i, question in enumerate(questions, 1):
        print(f"\n({i}/{len(questions)})")
        answers[question.id] = ask_question(question)

    logger.debug(f"Collected {sum(1 for a in answers.values() if a)} of {len(questions)} answers")
    return ClarifyingAnswers(feature_description=feature_description, answers=answers)
