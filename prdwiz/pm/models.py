"""
Data models for PRD generation.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional


class TrackerFormat(str, Enum):
    """Structured formats a PRD can be converted into."""
    JSON = "json"
    BEADS = "beads"


@dataclass(frozen=True)
class ClarifyingQuestion:
    """A question asked after the feature description."""
    id: str
    question: str
    follow_up: Optional[str] = None            # Asked when the answer is too brief


@dataclass(frozen=True)
class ClarifyingAnswers:
    """Everything the user told the wizard. Sole input to generation."""
    feature_description: str
    answers: Mapping[str, str] = field(default_factory=dict)  # question id -> answer ("" if skipped)

    def __post_init__(self):
        # Copy so later changes to the caller's dict don't leak in
        object.__setattr__(self, "answers", MappingProxyType(dict(self.answers)))

    def get(self, question_id: str) -> str:
        return self.answers.get(question_id, "")


@dataclass(frozen=True)
class UserStory:
    """A prioritized unit of work carved out of the answers."""
    id: str                                    # US-001
    title: str
    priority: int                              # 1 (highest) .. 3
    description: str = ""
    acceptance_criteria: tuple[str, ...] = ()


@dataclass(frozen=True)
class GeneratedPrd:
    """A generated PRD. Read-only once built."""
    name: str
    slug: str
    branch_name: str
    user_stories: tuple[UserStory, ...]
    description: str = ""
    context: tuple[tuple[str, str], ...] = ()  # (question text, answer) for answered questions


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting a PRD into a tracker format."""
    success: bool
    format: Any                                # TrackerFormat, or the unrecognized tag as given
    path: Optional[Path] = None                # Present iff success
    error: Optional[str] = None                # Present iff not success
    document: Optional[dict] = None            # Structured document to persist


@dataclass(frozen=True)
class PrdGenerationResult:
    """Terminal outcome of one wizard run."""
    success: bool
    cancelled: bool = False
    markdown_path: Optional[Path] = None
    json_path: Optional[Path] = None
    prd: Optional[GeneratedPrd] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.success and self.cancelled:
            raise ValueError("A result cannot be both successful and cancelled")
        if self.success and self.error:
            raise ValueError("A successful result cannot carry an error")
        if self.json_path is not None and self.markdown_path is None:
            raise ValueError("json_path requires markdown_path")
