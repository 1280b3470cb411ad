"""Session layer for the word-search game."""

from .models import (
    Role,
    Difficulty,
    Phase,
    Outcome,
    DIFFICULTIES,
    DEFAULT_PALETTE,
    DEFAULT_REVEAL_COLOR,
    DifficultyTable,
    LLMSettings,
    WordSearchConfig,
    FoundWordRecord,
    RoundState,
    StatEntry,
    HostCallbacks,
    next_difficulty,
)
from .errors import StorageError, InvalidActionError
from .llm_client import LLMClient
from .word_provider import WordListProvider, parse_word_list
from .storage import KeyValueStorage, MemoryStorage, JsonFileStorage
from .stats import StatsRecorder
from .timer import IntervalTimer
from .session import RoundStateMachine

__all__ = [
    "Role",
    "Difficulty",
    "Phase",
    "Outcome",
    "DIFFICULTIES",
    "DEFAULT_PALETTE",
    "DEFAULT_REVEAL_COLOR",
    "DifficultyTable",
    "LLMSettings",
    "WordSearchConfig",
    "FoundWordRecord",
    "RoundState",
    "StatEntry",
    "HostCallbacks",
    "next_difficulty",
    "StorageError",
    "InvalidActionError",
    "LLMClient",
    "WordListProvider",
    "parse_word_list",
    "KeyValueStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "StatsRecorder",
    "IntervalTimer",
    "RoundStateMachine",
]
