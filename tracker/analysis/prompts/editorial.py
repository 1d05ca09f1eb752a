"""
Prompt template for generating hints and an editorial from a statement and
an accepted (unofficial) solution.
"""
from __future__ import annotations

MISSING_STATEMENT = '(Problem statement could not be fetched)'
MISSING_SOLUTION = '(Solution code could not be fetched)'


def build_editorial_prompt(
    statement: str,
    solution: str,
    language: str = 'English',
    hint_count: int = 3,
) -> str:
    """Render the user prompt for editorial generation.

    Blank inputs are replaced by a placeholder so the prompt is always
    complete. The output depends only on the arguments.

    Args:
        statement: Problem statement text.
        solution: Accepted source code used as guidance.
        language: Language the hints and editorial should be written in.
        hint_count: Approximate number of hints to ask for.

    Returns:
        The prompt text, ending with the required JSON shape.
    """
    if not statement or not statement.strip():
        statement = MISSING_STATEMENT
    if not solution or not solution.strip():
        solution = MISSING_SOLUTION

    return f"""You are an expert competitive programming assistant. Given the following problem statement and its solution, generate:
- some helpful hints for a student (in {language}, do not give away the full solution). They should gradually lead the student to the key ideas and approach without revealing the solution directly. Provide around {hint_count} hints, adjusting the number to the difficulty of the problem. Keep each hint short and to the point.
- a detailed editorial (in {language}, explaining the solution and key ideas) in the style of a Codeforces editorial, structured in markdown with the necessary sections. Do not include code snippets and do not reuse any names from the solution; names from the task itself are fine.

Problem statement:
{statement}

Solution (this is not the official solution):
{solution}

Return a JSON object with two fields: "hints" (an array of strings) and "editorial" (a string)."""


def build_editorial_messages(
    statement: str,
    solution: str,
    system_prompt: str | None = None,
    language: str = 'English',
    hint_count: int = 3,
) -> list[dict]:
    """Wrap the editorial prompt into chat messages for an LLM provider."""
    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({
        "role": "user",
        "content": build_editorial_prompt(statement, solution, language, hint_count),
    })
    return messages
