"""
Pydantic models for the game session layer.

This module contains the configuration, round state, stats and host
callback models used throughout the session layer. The main logic classes
(RoundStateMachine, WordListProvider, LLMClient, StatsRecorder) remain in
their respective files.
"""

from typing import Callable, List, Literal, Optional, Set
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..puzzle.models import Cell, GeneratedGrid, PlacementRecord


# Type aliases
Role = Literal["system", "user", "assistant"]
Difficulty = Literal["facil", "medio", "dificil"]
Phase = Literal["loading", "active", "round-complete", "game-over", "victory", "failed"]
Outcome = Literal["win", "timeout"]

DIFFICULTIES: List[Difficulty] = ["facil", "medio", "dificil"]

DEFAULT_PALETTE: List[str] = [
    "#38bdf8", "#fbbf24", "#34d399", "#f87171", "#a78bfa", "#60a5fa",
    "#f472b6", "#a3e635", "#2dd4bf", "#f97316", "#84cc16", "#d946ef",
]
DEFAULT_REVEAL_COLOR = "#a1a1aa"


def next_difficulty(difficulty: Difficulty) -> Optional[Difficulty]:
    """Difficulty unlocked after completing a level; None at the top level."""
    if difficulty == "facil":
        return "medio"
    elif difficulty == "medio":
        return "dificil"
    elif difficulty == "dificil":
        return None
    raise ValueError(f"Unknown difficulty: {difficulty!r}")


class DifficultyTable(BaseModel):
    """One positive integer per difficulty level."""
    facil: int = Field(..., gt=0)
    medio: int = Field(..., gt=0)
    dificil: int = Field(..., gt=0)

    def get(self, difficulty: Difficulty) -> int:
        if difficulty == "facil":
            return self.facil
        elif difficulty == "medio":
            return self.medio
        elif difficulty == "dificil":
            return self.dificil
        raise ValueError(f"Unknown difficulty: {difficulty!r}")


class LLMSettings(BaseModel):
    """Settings for the remote word generator."""
    model_config = ConfigDict(extra='allow')

    model: Optional[str] = "gemini/gemini-2.5-flash"  # None disables the remote path
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    timeout_seconds: float = Field(default=8.0, gt=0)
    language: str = "Brazilian Portuguese"
    # Additional kwargs are allowed and passed to LiteLLM


class WordSearchConfig(BaseModel):
    """Host-tunable configuration for a word-search session."""
    sizes: DifficultyTable = Field(default_factory=lambda: DifficultyTable(facil=10, medio=12, dificil=15))
    word_counts: DifficultyTable = Field(default_factory=lambda: DifficultyTable(facil=6, medio=8, dificil=10))
    time_limits: DifficultyTable = Field(default_factory=lambda: DifficultyTable(facil=240, medio=360, dificil=600))
    palette: List[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE), min_length=1)
    reveal_color: str = DEFAULT_REVEAL_COLOR
    points_per_letter: int = Field(default=10, ge=0)
    time_bonus_rate: float = Field(default=0.5, ge=0)
    advance_delay_seconds: float = Field(default=2.5, ge=0)
    history_limit: int = Field(default=100, ge=0)
    placement_attempts: int = Field(default=100, ge=1)
    tick_seconds: float = Field(default=1.0, gt=0)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    storage_path: Optional[str] = None
    storage_key: str = "quiz-app-data"
    stats_limit: int = Field(default=50, ge=1)

    @model_validator(mode="after")
    def _reveal_color_distinct(self) -> "WordSearchConfig":
        if self.reveal_color in self.palette:
            raise ValueError(f"reveal_color {self.reveal_color} must not be one of the palette colors")
        return self


class FoundWordRecord(BaseModel):
    """Highlight of a found (or revealed) word."""
    word: str
    path: List[Cell]
    color: str


class RoundState(BaseModel):
    """State of a single round; replaced wholesale when a new round loads."""
    round_id: int = 0
    phase: Phase = "loading"
    puzzle: Optional[GeneratedGrid] = None
    found_words: List[FoundWordRecord] = Field(default_factory=list)
    revealed: List[FoundWordRecord] = Field(default_factory=list)
    timer_seconds_remaining: int = 0
    points: int = 0
    time_bonus: int = 0
    error: Optional[str] = None

    @property
    def grid(self) -> List[List[str]]:
        return self.puzzle.grid if self.puzzle else []

    @property
    def words(self) -> List[str]:
        return self.puzzle.placed_words if self.puzzle else []

    @property
    def placements(self) -> List[PlacementRecord]:
        return self.puzzle.placements if self.puzzle else []

    @property
    def found(self) -> Set[str]:
        return {record.word for record in self.found_words}

    @property
    def is_complete(self) -> bool:
        """All placed words found (and at least one was placed)."""
        return bool(self.words) and len(self.found_words) == len(self.words)


class StatEntry(BaseModel):
    """A persisted round outcome."""
    model_config = ConfigDict(populate_by_name=True)

    date: str
    theme: str
    difficulty: Difficulty
    points: int
    player_name: str = Field(default="", alias="playerName")
    outcome: Optional[Outcome] = None


class HostCallbacks(BaseModel):
    """Notifications the session sends to its host UI."""
    on_exit: Optional[Callable[[], None]] = None
    on_restart: Optional[Callable[[], None]] = None
    on_next_level: Optional[Callable[[], None]] = None
    on_round_complete: Optional[Callable[[int], None]] = None
