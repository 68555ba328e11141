"""Prompt template for turning free-form text into Kanban tickets."""

from __future__ import annotations

TEXT_DELIMITER = "---"

_INSTRUCTIONS = [
    "Human: You are a helpful assistant that converts unstructured text into a structured list of Kanban tickets.",
    "Parse the following text and generate a JSON array of ticket objects. "
    "Each ticket object should have the following fields if the information is available:",
    "- id: (string, optional, can be generated if not present)",
    "- title: (string, required, concise summary of the task)",
    "- description: (string, optional, detailed description)",
    '- status: (string, default to "todo". Options: "todo", "inProgress", "done")',
    '- category: (string, optional, e.g., "Global Terminology", "Supply Partners", "Supply Packages", '
    '"General", "Branding", "Frontend", "Backend", "Infrastructure", etc. Infer if possible.)',
    '- section: (string, optional, e.g., "Main Table Screen", "Edit Drawer", "Global Changes", etc. '
    "Infer if possible.)",
    "- isSubtask: (boolean, true if this is a subtask of another ticket in the provided text)",
    "- parentId: (string, optional, the ID of the parent ticket if isSubtask is true. "
    "Ensure this ID matches an ID of another ticket generated from this same text block.)",
    "",
    "IMPORTANT:",
    "- If a task seems to be a sub-task of another task mentioned in the text, set isSubtask to true "
    "and try to infer the parentId from another task in the input text. "
    "You might need to assign temporary IDs to parent tasks first if they are not explicitly given.",
    "- If no parent task is obvious from the text, parentId should be null and isSubtask should be false.",
    "- The output MUST be a valid JSON array of ticket objects. "
    "Do not include any other text or explanation outside the JSON array itself.",
    "- If you generate IDs, ensure they are unique within the generated list.",
    "",
    "Here is the text to parse:",
]


def build_prompt(text: str) -> str:
    """Return the completion prompt for ``text``.

    The text is embedded verbatim between delimiter lines and the prompt
    ends with an open array bracket so the model continues straight into
    JSON.
    """

    lines = list(_INSTRUCTIONS)
    lines.extend([TEXT_DELIMITER, text, TEXT_DELIMITER, "", "Assistant: [", ""])
    return "\n".join(lines)
