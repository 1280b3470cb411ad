import asyncio
import logging
import math
import random
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..puzzle.errors import PuzzleGenerationError
from ..puzzle.grid import build_puzzle
from ..puzzle.models import Cell, GridGeometry
from ..puzzle.selection import SelectionTracker, match_selection
from ..puzzle.data import RANDOM_THEME
from .errors import InvalidActionError
from .models import (
    Difficulty,
    FoundWordRecord,
    HostCallbacks,
    Outcome,
    Phase,
    RoundState,
    StatEntry,
    WordSearchConfig,
    next_difficulty,
)
from .stats import StatsRecorder
from .storage import JsonFileStorage, MemoryStorage
from .timer import IntervalTimer, running_loop
from .word_provider import WordListProvider

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Could not generate the puzzle. Exit and try again."


class RoundStateMachine(BaseModel):
    """
    Top-level orchestrator for a word-search session.

    Drives rounds through loading -> active -> round-complete (then the
    next round), game-over, victory, or failed. Owns the round timer, the
    drag-gesture tracker, and the session state that outlives a round
    (accumulated points and used-word history).

    Attributes:
        config: Host-tunable configuration
        difficulty: Current difficulty level
        theme: Theme key for the offline word bank
        theme_name: Display name of the theme (sent to the LLM, stored in stats)
        player_name: Player name stored in stats
        provider: Word list source
        stats: Round outcome recorder
        callbacks: Host UI notifications
        state: The current round
        used_words: Words served this session, oldest first
        rounds_completed: Rounds completed since the last restart/level change
        generation: Incremented on every load and on exit; stale loads are discarded
        closed: True once the player has left the game
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: WordSearchConfig = Field(default_factory=WordSearchConfig)
    difficulty: Difficulty = "facil"
    theme: str = RANDOM_THEME
    theme_name: str = ""
    player_name: str = ""
    provider: WordListProvider = Field(default_factory=WordListProvider)
    stats: Optional[StatsRecorder] = None
    callbacks: HostCallbacks = Field(default_factory=HostCallbacks)
    seed: Optional[int] = None

    state: RoundState = Field(default_factory=RoundState)
    used_words: List[str] = Field(default_factory=list)
    rounds_completed: int = 0
    generation: int = 0
    closed: bool = False

    _rng: random.Random = None
    _timer: IntervalTimer = None
    _tracker: SelectionTracker = None
    _advance_task: Optional[asyncio.Task] = None

    def model_post_init(self, __context) -> None:
        """Set up the random generator, timer and gesture tracker."""
        if not self.theme_name:
            self.theme_name = self.theme
        self._rng = random.Random(self.seed)
        self._timer = IntervalTimer(self.config.tick_seconds, self.tick)
        self._tracker = SelectionTracker(self.size, is_active=self._is_active)

    @classmethod
    def create(
        cls,
        config: Optional[WordSearchConfig] = None,
        difficulty: Difficulty = "facil",
        theme: str = RANDOM_THEME,
        theme_name: Optional[str] = None,
        player_name: str = "",
        provider: Optional[WordListProvider] = None,
        stats: Optional[StatsRecorder] = None,
        callbacks: Optional[HostCallbacks] = None,
        seed: Optional[int] = None,
    ) -> "RoundStateMachine":
        """
        Factory method wiring a session from configuration.

        Args:
            config: Optional WordSearchConfig (defaults apply otherwise)
            difficulty: Starting difficulty
            theme: Theme key
            theme_name: Theme display name (defaults to the key)
            player_name: Player name stored with stats
            provider: Word source (built from config.llm if omitted)
            stats: Stats recorder (built from config storage settings if omitted)
            callbacks: Host UI notifications
            seed: Optional random seed for reproducible grids

        Returns:
            A RoundStateMachine ready for load_round()
        """
        config = config or WordSearchConfig()

        if provider is None:
            provider = WordListProvider.create(config.llm, seed=seed)

        if stats is None:
            storage = JsonFileStorage(config.storage_path) if config.storage_path else MemoryStorage()
            stats = StatsRecorder(storage, storage_key=config.storage_key, limit=config.stats_limit)

        return cls(
            config=config,
            difficulty=difficulty,
            theme=theme,
            theme_name=theme_name or theme,
            player_name=player_name,
            provider=provider,
            stats=stats,
            callbacks=callbacks or HostCallbacks(),
            seed=seed,
        )

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def points(self) -> int:
        return self.state.points

    @property
    def size(self) -> int:
        """Grid side for the current difficulty."""
        return self.config.sizes.get(self.difficulty)

    @property
    def word_count(self) -> int:
        return self.config.word_counts.get(self.difficulty)

    @property
    def time_limit(self) -> int:
        return self.config.time_limits.get(self.difficulty)

    @property
    def selection(self) -> List[Cell]:
        """Cells of the in-progress drag, if any."""
        return list(self._tracker.path)

    def _is_active(self) -> bool:
        return not self.closed and self.state.phase == "active"

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------

    async def load_round(self) -> RoundState:
        """
        Start a new round: fetch words, build the grid and start the timer.

        Points carry over from the previous round. Never raises; a grid
        with no placed word leaves the round in the failed phase.

        Returns:
            The new round state
        """
        self._cancel_pending()
        self.generation += 1
        generation = self.generation

        self.state = RoundState(round_id=generation, phase="loading", points=self.state.points)
        self._tracker = SelectionTracker(self.size, is_active=self._is_active)

        excluding = self.used_words[-self.config.history_limit:] if self.config.history_limit else []
        words = await self.provider.get_words(
            self.theme,
            self.word_count,
            excluding=excluding,
            max_length=self.size,
            theme_name=self.theme_name,
        )

        if generation != self.generation or self.closed:
            logger.debug(f"Discarding stale word list for round {generation}")
            return self.state

        try:
            puzzle = build_puzzle(
                words,
                self.size,
                rng=self._rng,
                max_attempts=self.config.placement_attempts,
            )
        except PuzzleGenerationError as e:
            logger.error(f"Round {generation} failed: {e}")
            self.state.phase = "failed"
            self.state.error = GENERATION_FAILED_MESSAGE
            return self.state

        if puzzle.dropped_words:
            logger.info(f"Round {generation}: dropped {len(puzzle.dropped_words)} words that did not fit")

        self.state.puzzle = puzzle
        self.state.timer_seconds_remaining = self.time_limit
        self.state.phase = "active"
        self._timer.start()

        logger.info(
            f"Round {generation} started: {len(puzzle.placed_words)} words, "
            f"{self.size}x{self.size}, {self.time_limit}s"
        )
        return self.state

    def tick(self) -> None:
        """Advance the round clock by one second; times out at zero."""
        if not self._is_active():
            return

        self.state.timer_seconds_remaining = max(self.state.timer_seconds_remaining - 1, 0)
        if self.state.timer_seconds_remaining == 0:
            self._game_over()

    def _game_over(self) -> None:
        self.state.phase = "game-over"
        self._timer.cancel()
        self._tracker.cancel()

        found = self.state.found
        for placement in self.state.placements:
            if placement.word not in found:
                self.state.revealed.append(FoundWordRecord(
                    word=placement.word,
                    path=placement.path,
                    color=self.config.reveal_color,
                ))

        logger.info(f"Round {self.state.round_id} timed out with {len(self.state.revealed)} words unfound")
        self._record_outcome("timeout")

    def _complete_round(self) -> None:
        self.state.phase = "round-complete"
        self._timer.cancel()

        bonus = math.floor(self.state.timer_seconds_remaining * self.config.time_bonus_rate)
        self.state.time_bonus = bonus
        self.state.points += bonus

        self.used_words.extend(self.state.words)
        limit = self.config.history_limit
        self.used_words = self.used_words[-limit:] if limit else []
        self.rounds_completed += 1

        logger.info(f"Round {self.state.round_id} complete, time bonus {bonus}, total {self.state.points}")

        if self.callbacks.on_round_complete:
            self.callbacks.on_round_complete(self.state.points)

        loop = running_loop()
        if loop is None:
            logger.debug("No running event loop; next round must be loaded by the host")
            return
        self._advance_task = loop.create_task(self._advance_after_delay(self.generation))

    async def _advance_after_delay(self, generation: int) -> None:
        await asyncio.sleep(self.config.advance_delay_seconds)
        if generation != self.generation or self.closed or self.state.phase != "round-complete":
            return
        await self.load_round()

    def _cancel_pending(self) -> None:
        """Cancel the timer and any scheduled auto-advance (unless it is the caller)."""
        self._timer.cancel()
        task = self._advance_task
        self._advance_task = None
        if task is None or task.done():
            return
        current = asyncio.current_task() if running_loop() else None
        if task is not current:
            task.cancel()

    def _record_outcome(self, outcome: Outcome) -> None:
        if self.stats is None:
            return
        self.stats.record(StatEntry(
            date=datetime.now().isoformat(),
            theme=self.theme_name,
            difficulty=self.difficulty,
            points=self.state.points,
            player_name=self.player_name,
            outcome=outcome,
        ))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def start_selection(self, row: int, col: int) -> None:
        """Pointer down on a cell."""
        self._tracker.start(row, col)

    def extend_selection(self, row: int, col: int) -> None:
        """Pointer moved onto a cell."""
        self._tracker.extend(row, col)

    def touch_move(self, x: float, y: float, geometry: GridGeometry) -> None:
        """Touch moved to a screen point."""
        self._tracker.touch_move(x, y, geometry)

    def release_selection(self) -> Optional[FoundWordRecord]:
        """
        Pointer up: validate the path and score a match.

        Returns:
            The new FoundWordRecord, or None if the path matched nothing
        """
        path = self._tracker.release()
        if not self._is_active() or self.state.puzzle is None:
            return None

        word = match_selection(path, self.state.puzzle, self.state.found)
        if word is None:
            return None

        palette = self.config.palette
        record = FoundWordRecord(
            word=word,
            path=path,
            color=palette[len(self.state.found_words) % len(palette)],
        )
        self.state.found_words.append(record)
        self.state.points += len(word) * self.config.points_per_letter
        logger.debug(f"Found {word} ({len(self.state.found_words)}/{len(self.state.words)})")

        if self.state.is_complete:
            self._complete_round()

        return record

    # ------------------------------------------------------------------
    # Host actions
    # ------------------------------------------------------------------

    def finish(self) -> RoundState:
        """
        Player ends the session ("finish"): freeze the score and record a win.

        Raises:
            InvalidActionError: If no round is being played
        """
        if self.closed:
            raise InvalidActionError("finish", "closed")
        if self.state.phase not in ("active", "round-complete"):
            raise InvalidActionError("finish", self.state.phase)

        self._cancel_pending()
        self._tracker.cancel()
        self.state.phase = "victory"
        self._record_outcome("win")
        logger.info(f"Session finished by player with {self.state.points} points")
        return self.state

    def can_advance_level(self) -> bool:
        """True after a completed round when a harder level exists."""
        return (
            not self.closed
            and next_difficulty(self.difficulty) is not None
            and self.rounds_completed > 0
            and self.state.phase in ("round-complete", "victory")
        )

    async def next_level(self) -> RoundState:
        """
        Move to the next difficulty with a fresh score and word history.

        Raises:
            InvalidActionError: If the level cannot be advanced now
        """
        if not self.can_advance_level():
            reason = "no harder level" if next_difficulty(self.difficulty) is None else "no completed round"
            raise InvalidActionError("advance level", self.state.phase, reason)

        self._cancel_pending()
        self.difficulty = next_difficulty(self.difficulty)
        self._reset_session()
        if self.callbacks.on_next_level:
            self.callbacks.on_next_level()
        return await self.load_round()

    async def restart(self) -> RoundState:
        """Start over at the same difficulty and theme with a fresh score and history."""
        if self.closed:
            raise InvalidActionError("restart", "closed")

        self._cancel_pending()
        self._reset_session()
        if self.callbacks.on_restart:
            self.callbacks.on_restart()
        return await self.load_round()

    def _reset_session(self) -> None:
        self.state = RoundState(round_id=self.generation, phase="loading", points=0)
        self.used_words = []
        self.rounds_completed = 0

    def exit(self) -> None:
        """Leave the game: stop the timer and discard any in-flight load."""
        self._cancel_pending()
        self._tracker.cancel()
        self.generation += 1
        self.closed = True
        if self.callbacks.on_exit:
            self.callbacks.on_exit()

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def cell_colors(self) -> Dict[Cell, str]:
        """Highlight colour per cell; found words paint over revealed ones."""
        colors: Dict[Cell, str] = {}
        for record in self.state.revealed:
            for cell in record.path:
                colors[cell] = record.color
        for record in self.state.found_words:
            for cell in record.path:
                colors[cell] = record.color
        return colors

    def get_state(self) -> Dict[str, Any]:
        """
        Get the current session state as a dictionary.

        Useful for serialization and logging.

        Returns:
            Dictionary containing session state
        """
        return {
            "round_id": self.state.round_id,
            "phase": self.state.phase,
            "difficulty": self.difficulty,
            "theme": self.theme_name,
            "size": self.size,
            "points": self.state.points,
            "time_bonus": self.state.time_bonus,
            "timer_seconds_remaining": self.state.timer_seconds_remaining,
            "words": list(self.state.words),
            "found_words": [r.word for r in self.state.found_words],
            "revealed_words": [r.word for r in self.state.revealed],
            "used_words": len(self.used_words),
            "rounds_completed": self.rounds_completed,
            "can_advance_level": self.can_advance_level(),
            "error": self.state.error,
        }
