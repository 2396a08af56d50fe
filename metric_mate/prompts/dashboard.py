"""Instructions for dashboard summaries and cards."""

from types import MappingProxyType
from typing import Mapping

from metric_mate.models.mode import Mode

DASHBOARD_INSTRUCTIONS_BY_MODE: Mapping[str, str] = MappingProxyType({
    Mode.DASHBOARD_SUMMARY.value: """You are summarizing structured project survey data for an internal project dashboard.

Using ONLY the information provided below:

Write a clear, concise summary in 2–3 short sentences.

Be factual and neutral.

Do NOT invent outcomes, metrics, timelines, or tools.

If information is missing, stay general or state “not specified.”

Do NOT include headings, bullet points, greetings, or sign-offs.

Do NOT reference surveys, AI, or source materials.

The output must be suitable for an internal project status review and fully editable by humans.""",

    Mode.DASHBOARD_DELIVERY.value: """Summarize what was delivered in this project phase in 2–3 short sentences.

Use only the provided data. Be factual and neutral.
Highlight shipped work or completed goals. If delivery is unclear, stay general.
Do not invent metrics, tools, timelines, or outcomes.
Plain text only, no greetings or sign-offs.""",

    Mode.DASHBOARD_RESULTS.value: """Summarize results and impact in 2–3 short sentences.

Use only the provided data. Focus on outcomes or confidence/health signals.
If results are not specified, say they are not specified and keep it general.
Do not invent metrics, tools, timelines, or outcomes.
Plain text only, no greetings or sign-offs.""",

    Mode.DASHBOARD_WINS.value: """Summarize the biggest wins or highlights in 2–3 short sentences.

Use only the provided data. Emphasize positive outcomes or completed high-importance goals.
If wins are not specified, keep it general and note that wins were limited or not specified.
Do not invent metrics, tools, timelines, or outcomes.
Plain text only, no greetings or sign-offs.""",

    Mode.DASHBOARD_CHALLENGES.value: """Summarize current challenges, blockers, or risks in 2–3 short sentences.

Use only the provided data. Be factual and neutral.
If challenges are not specified, state that they are not specified.
Do not invent metrics, tools, timelines, or outcomes.
Plain text only, no greetings or sign-offs.""",

    Mode.DASHBOARD_LEARNINGS.value: """Summarize key learnings or insights in 2–3 short sentences.

Use only the provided data. Mention adjustments or observations if available.
If learnings are not specified, state that they are not specified.
Do not invent metrics, tools, timelines, or outcomes.
Plain text only, no greetings or sign-offs.""",

    Mode.DASHBOARD_NEXT_STEPS.value: """Summarize near-term next steps or recommendations in 2–3 short sentences.

Use only the provided data. Keep the tone neutral and action-oriented.
If next steps are not specified, state that they are not specified.
Do not invent metrics, tools, timelines, or outcomes.
Plain text only, no greetings or sign-offs.""",

    Mode.DASHBOARD_RESULTS_CARD.value: """Write a brief internal Results & Impact summary.

Rules (absolute):
- Do not mention numbers, scores, ratings, or dashboards.
- Do not repeat input text verbatim.
- Do not include meta or reporting language.
- Translate inputs into plain professional language.
- Do not use labels, headings, or category names (e.g., “Progress Direction,” “Goal Movement”) in the output.
- Write in natural sentences, as if summarizing for a stakeholder update.
- Do not start sentences with labels, headings, or meta phrases; begin sentences naturally, as if written by a project lead.

Structure:
- Exactly 2 sentences.
- Sentence 1 explains overall progress direction.
- Sentence 2 explains evidence based on goal movement.

Tone:
- Neutral, confident, internal.

INPUT:
{PROGRESS_DIRECTION}
{GOAL_MOVEMENT}""",

    Mode.DASHBOARD_CHALLENGES_CARD.value: """Write 1–2 sentences summarizing the main challenges and constraints affecting this project.
Use present tense, describe only existing or recent issues, and do not suggest solutions or future actions.
Do not include any future plans, promises, or "we will" language.
Do not reference dashboards, updates, communications, or future documentation.

{SURVEY_DATA}""",

    Mode.DASHBOARD_LEARNINGS_CARD.value: """Write 1–2 concise sentences summarizing key learnings from this project.
Focus on realizations, shifts in approach, or decisions informed by experience.
Use past tense, neutral internal tone, and do not restate goals or challenges.

{SURVEY_DATA}""",

    Mode.DASHBOARD_NEXTSTEPS_CARD.value: """Write a brief internal summary of immediate next steps already defined.

The first sentence must begin with:
"Near-term priorities include"

Only restate actions explicitly present in the data.
Do not introduce new suggestions or requests.

Tense:
- Future-oriented but factual.

Length:
- Exactly 2 sentences
- 12–18 words per sentence

{SURVEY_DATA}""",
})
