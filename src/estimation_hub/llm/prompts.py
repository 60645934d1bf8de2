"""Extraction prompt template for Gemini.

The template fixes the per-field extraction rules, the subtask vocabulary,
the confidence rubric, and the exact JSON shape the model must return.
Model name stored as constant so it can be bumped in one place.
"""

from estimation_hub.models.extraction import EXTRACTION_FIELDS

GEMINI_MODEL = "gemini-2.5-flash"

# Subtask phrases estimators use; kept verbatim in extracted values
SUBTASK_KEYWORDS = [
    "UI Fix",
    "checklist fix",
    "CL fix",
    "blueprint fix",
    "BP fix",
    "CL & UI Fix",
    "BP & UI Fix",
    "annotation",
    "ASA Fix & Map",
    "logic",
    "testing",
    "testing 1",
    "testing 2",
]

_PROMPT_TEMPLATE = """\
You are an AI assistant that extracts estimation data from Slack conversation threads. \
Analyze the following Slack thread and extract the relevant information in JSON format.

EXTRACTION RULES:
1. Fund Name: Extract from the FIRST message in the thread only. This is REQUIRED. \
Look for phrases like "for ABC Fund", "ABC Fund", or similar patterns.
2. Items: Extract task items mentioned in the most recent conversation portion. \
Look for references to "item 1", "item 2", or specific task descriptions.
3. DS Estimation: Extract the Data Science team's estimation. Look for messages from DS team members. \
Preserve the exact original phrasing; never convert or normalize units \
(e.g., "2h", "2-3 days", "2h for annotation, 30m for UI fix").
4. LE Estimation: Extract the Logic Engineering team's estimation. Preserve the exact original phrasing.
5. QA Estimation: Extract the QA team's estimation. Preserve the exact original phrasing.
6. ClickUp Link: Extract any URL containing "clickup.com" from the most recent conversation.

SUBTASK RECOGNITION:
Common subtask keywords to identify and preserve: {subtasks}

CONFIDENCE SCORING:
Assign a confidence score (0.0 to 1.0) to every field:
- High (0.8-1.0): Clearly stated with explicit attribution
- Medium (0.5-0.79): Implied or inferred from context
- Low (0.0-0.49): Uncertain or missing
Use null as the value when a field is not present in the thread.

Return the result in this exact JSON structure:
{schema}

SLACK THREAD TO ANALYZE:
{thread}

Return ONLY the JSON object, no additional text or explanation."""


def build_response_schema() -> str:
    """Render the six-field JSON shape shown to the model."""
    lines = [
        f'  "{name}": {{ "value": "string or null", "confidence": 0.0-1.0 }}'
        for name in EXTRACTION_FIELDS
    ]
    return "{\n" + ",\n".join(lines) + "\n}"


def build_extraction_prompt(thread_text: str) -> str:
    """Assemble the full extraction prompt for a thread."""
    return _PROMPT_TEMPLATE.format(
        subtasks=", ".join(SUBTASK_KEYWORDS),
        schema=build_response_schema(),
        thread=thread_text,
    )
