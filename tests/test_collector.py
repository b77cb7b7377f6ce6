"""Tests for prdwiz.pm.collector module."""

from unittest.mock import patch

from prdwiz.pm.collector import BRIEF_ANSWER_THRESHOLD, ask_question, collect_answers
from prdwiz.pm.models import ClarifyingQuestion
from prdwiz.pm.questions import CLARIFYING_QUESTIONS

LONG_ANSWER = "This answer is comfortably long enough"

WITH_FOLLOW_UP = ClarifyingQuestion(id="users", question="Who?", follow_up="Tell me more")
WITHOUT_FOLLOW_UP = ClarifyingQuestion(id="non_goals", question="Out of scope?")


class TestAskQuestion:
    """Tests for ask_question() and the brevity follow-up."""

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_brief_answer_gets_follow_up(self, mock_prompt):
        mock_prompt.side_effect = ["admin", "more context"]
        assert ask_question(WITH_FOLLOW_UP) == "admin. more context"
        assert mock_prompt.call_count == 2
        assert mock_prompt.call_args_list[1].args[0] == "Tell me more"

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_empty_follow_up_keeps_original(self, mock_prompt):
        mock_prompt.side_effect = ["admin", ""]
        assert ask_question(WITH_FOLLOW_UP) == "admin"

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_long_answer_has_no_follow_up(self, mock_prompt):
        mock_prompt.side_effect = [LONG_ANSWER]
        assert ask_question(WITH_FOLLOW_UP) == LONG_ANSWER
        assert mock_prompt.call_count == 1

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_threshold_is_exclusive(self, mock_prompt):
        answer = "x" * BRIEF_ANSWER_THRESHOLD
        mock_prompt.side_effect = [answer]
        assert ask_question(WITH_FOLLOW_UP) == answer
        assert mock_prompt.call_count == 1

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_empty_answer_has_no_follow_up(self, mock_prompt):
        mock_prompt.side_effect = [""]
        assert ask_question(WITH_FOLLOW_UP) == ""
        assert mock_prompt.call_count == 1

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_brief_answer_without_follow_up_prompt(self, mock_prompt):
        mock_prompt.side_effect = ["none"]
        assert ask_question(WITHOUT_FOLLOW_UP) == "none"
        assert mock_prompt.call_count == 1


class TestCollectAnswers:
    """Tests for collect_answers()."""

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_empty_description_cancels_immediately(self, mock_prompt):
        mock_prompt.side_effect = [""]
        assert collect_answers() is None
        assert mock_prompt.call_count == 1

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_collects_every_question_in_order(self, mock_prompt):
        mock_prompt.side_effect = ["Add dark mode toggle"] + [LONG_ANSWER] * len(CLARIFYING_QUESTIONS)
        answers = collect_answers()
        assert answers.feature_description == "Add dark mode toggle"
        assert list(answers.answers) == [q.id for q in CLARIFYING_QUESTIONS]
        assert all(a == LONG_ANSWER for a in answers.answers.values())

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_skipped_questions_recorded_as_empty(self, mock_prompt):
        mock_prompt.side_effect = ["Add dark mode toggle"] + [""] * len(CLARIFYING_QUESTIONS)
        answers = collect_answers()
        assert answers.answers == {q.id: "" for q in CLARIFYING_QUESTIONS}

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_follow_up_stored_with_original(self, mock_prompt):
        questions = [WITH_FOLLOW_UP, WITHOUT_FOLLOW_UP]
        mock_prompt.side_effect = ["Feature", "short", "more context", LONG_ANSWER]
        answers = collect_answers(questions)
        assert answers.get("users") == "short. more context"
        assert answers.get("non_goals") == LONG_ANSWER

    @patch("prdwiz.lib.prompts.prompt_text")
    def test_shows_progress_counter(self, mock_prompt, capsys):
        mock_prompt.side_effect = ["Feature"] + [LONG_ANSWER] * len(CLARIFYING_QUESTIONS)
        collect_answers()
        out = capsys.readouterr().out
        total = len(CLARIFYING_QUESTIONS)
        assert f"(1/{total})" in out
        assert f"({total}/{total})" in out
