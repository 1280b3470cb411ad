from typing import List, Optional


def format_excluded(excluding: Optional[List[str]], limit: int = 50) -> str:
    """Format the most recent excluded words as a comma-separated list."""
    if not excluding or limit <= 0:
        return ""
    return ", ".join(excluding[-limit:])


def build_word_prompt(
    theme_name: str,
    count: int,
    max_length: int,
    language: str,
    excluding: Optional[List[str]] = None,
    history_limit: int = 50,
) -> str:
    """
    Build the user prompt requesting a themed word list.

    Args:
        theme_name: Display name of the theme (e.g. "Animais")
        count: Number of words requested
        max_length: Maximum number of letters per word (the grid size)
        language: Language the words must be in
        excluding: Words already served this session, oldest first
        history_limit: How many of the most recent excluded words to list

    Returns:
        Formatted prompt string
    """
    lines = []

    lines.append(f"Generate a list of {count} simple words in {language} related to the theme \"{theme_name}\".")
    lines.append(f"Each word must have at most {max_length} letters.")
    lines.append("Avoid compound words, spaces and hyphens.")
    lines.append("Return ONLY a JSON array of strings.")

    excluded = format_excluded(excluding, history_limit)
    if excluded:
        lines.append("")
        lines.append(f"IMPORTANT: do NOT use these recently used words: [{excluded}].")

    return "\n".join(lines)
