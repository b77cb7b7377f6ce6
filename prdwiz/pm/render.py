"""
Markdown rendering for generated PRDs.

Output depends only on the PRD: no timestamps, no environment data, so the
same PRD always renders to byte-identical markdown.
"""

from prdwiz.pm.models import GeneratedPrd, UserStory

PRIORITY_LABELS = {
    1: "High",
    2: "Medium",
    3: "Low",
}


def story_summary_line(story: UserStory) -> str:
    """One-line summary of a story: id, priority and title."""
    return f"- **{story.id}** [P{story.priority}] {story.title}"


def _story_section(story: UserStory) -> list[str]:
    lines = [
        f"### {story.id}: {story.title}",
        "",
        f"**Priority:** {story.priority} ({PRIORITY_LABELS.get(story.priority, 'Unknown')})",
        "",
    ]

    if story.description:
        lines.extend([story.description, ""])

    if story.acceptance_criteria:
        lines.extend(["**Acceptance Criteria:**", ""])
        for ac in story.acceptance_criteria:
            lines.append(f"- [ ] {ac}")
        lines.append("")

    return lines


def render_prd_markdown(prd: GeneratedPrd) -> str:
    """Render a PRD as human-readable markdown."""
    lines = [
        f"# PRD: {prd.name}",
        "",
        f"**Branch:** `{prd.branch_name}`",
        f"**Slug:** `{prd.slug}`",
        "",
        "## Overview",
        "",
        prd.description or prd.name,
        "",
    ]

    for question, answer in prd.context:
        lines.extend([
            f"## {question}",
            "",
            answer,
            "",
        ])

    lines.extend([
        "## User Stories",
        "",
    ])
    for story in prd.user_stories:
        lines.append(story_summary_line(story))
    lines.append("")

    for story in prd.user_stories:
        lines.extend(_story_section(story))

    return "\n".join(lines).rstrip("\n") + "\n"
