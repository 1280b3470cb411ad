"""Prompt templates for the remote word generator."""

from .system_prompt import SYSTEM_PROMPT, get_system_prompt
from .word_prompt import build_word_prompt, format_excluded

__all__ = [
    "SYSTEM_PROMPT",
    "get_system_prompt",
    "build_word_prompt",
    "format_excluded",
]
