"""
Terminal front end for the word-search game.

Usage:
    python -m src.main
    python -m src.main config.yaml --theme animais --difficulty medio --player Ana
    python -m src.main --offline --seed 42 --verbose
    python -m src.main config.yaml --stats

Moves are typed as four numbers, "r1 c1 r2 c2": the cell where the drag
starts and the cell where it ends.
"""

import argparse
import asyncio
import logging
import sys
import threading
from pathlib import Path
from typing import List, Optional

import yaml

from .game import (
    DIFFICULTIES,
    HostCallbacks,
    InvalidActionError,
    JsonFileStorage,
    MemoryStorage,
    RoundStateMachine,
    StatsRecorder,
    WordSearchConfig,
)
from .puzzle import RANDOM_THEME, WORD_LISTS, render_grid

HELP = """Commands:
  r1 c1 r2 c2   select from (r1, c1) to (r2, c2)
  words         list the words to find
  finish        end the session and save your score
  restart       play again at the same difficulty
  next          go to the next difficulty (after finishing a round)
  quit          leave the game"""


def load_config(config_path: Optional[str]) -> WordSearchConfig:
    """Load the game configuration from a YAML file (defaults if no path)."""
    if not config_path:
        return WordSearchConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return WordSearchConfig(**data)


def parse_move(line: str) -> Optional[List[int]]:
    """Parse "r1 c1 r2 c2" into four integers, or None."""
    parts = line.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        return [int(p) for p in parts]
    except ValueError:
        return None


def format_time(seconds: int) -> str:
    minutes, secs = divmod(max(seconds, 0), 60)
    return f"{minutes:02d}:{secs:02d}"


def print_round(machine: RoundStateMachine) -> None:
    state = machine.state
    print()
    print(f"Theme: {machine.theme_name} | Level: {machine.difficulty} | "
          f"Points: {state.points} | Time: {format_time(state.timer_seconds_remaining)}")

    if state.phase == "failed":
        print(f"❌ {state.error}")
        return

    marks = {cell: "*" if color != machine.config.reveal_color else "?" for cell, color in machine.cell_colors().items()}
    print(render_grid(state.grid, marks))

    found = state.found
    remaining = [w for w in state.words if w not in found]
    print(f"Found {len(found)}/{len(state.words)}: {', '.join(r.word for r in state.found_words) or '-'}")
    if state.phase == "game-over":
        print(f"⏰ Time is up! Missing words: {', '.join(remaining)}")
    elif state.phase == "victory":
        print(f"🎉 Game finished! Final score: {state.points}")


def print_stats(stats: StatsRecorder) -> None:
    entries = stats.list()
    if not entries:
        print("No scores recorded yet.")
        return

    print(f"{'Date':<12}{'Player':<16}{'Theme':<14}{'Level':<10}{'Points':>8}")
    for entry in entries:
        print(f"{entry.date[:10]:<12}{entry.player_name[:15]:<16}{entry.theme[:13]:<14}"
              f"{entry.difficulty:<10}{entry.points:>8}")


async def read_line(prompt: str) -> str:
    """
    Read a line of input without blocking the event loop.

    The read runs on a daemon thread rather than the loop's executor, so
    Ctrl-C can shut the loop down while input() is still waiting.

    Raises:
        EOFError: If stdin is closed
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def deliver(line: Optional[str], error: Optional[BaseException]) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(line)

    def worker() -> None:
        try:
            line = input(prompt)
        except EOFError as e:
            line, error = None, e
        else:
            error = None
        if not loop.is_closed():
            loop.call_soon_threadsafe(deliver, line, error)

    threading.Thread(target=worker, daemon=True).start()
    return await future


async def wait_while_busy(machine: RoundStateMachine) -> None:
    """Wait out loading and the pause between rounds."""
    while not machine.closed and machine.phase in ("loading", "round-complete"):
        await asyncio.sleep(0.1)


async def play(machine: RoundStateMachine) -> int:
    print("Generating words...")
    await machine.load_round()
    print(HELP)

    while not machine.closed:
        await wait_while_busy(machine)
        if machine.closed:
            break
        print_round(machine)

        try:
            line = (await read_line("> ")).strip().lower()
        except EOFError:
            machine.exit()
            break

        if not line:
            continue

        try:
            if line == "quit":
                machine.exit()
            elif line == "finish":
                machine.finish()
            elif line == "restart":
                print("Generating words...")
                await machine.restart()
            elif line == "next":
                print("Generating words...")
                await machine.next_level()
            elif line == "words":
                print(", ".join(machine.state.words))
            elif line == "help":
                print(HELP)
            else:
                move = parse_move(line)
                if move is None:
                    print("Unrecognized command. Type 'help'.")
                    continue
                machine.start_selection(move[0], move[1])
                machine.extend_selection(move[2], move[3])
                record = machine.release_selection()
                if record:
                    print(f"✓ {record.word}!")
                    if machine.phase == "round-complete":
                        print(f"Round complete! Time bonus: {machine.state.time_bonus}. Next round coming up...")
                elif machine.phase == "active":
                    print("✗ No word there.")
        except InvalidActionError as e:
            print(f"Not now: {e}")

    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Play a word-search game in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  sizes: {facil: 10, medio: 12, dificil: 15}
  time_limits: {facil: 240, medio: 360, dificil: 600}
  storage_path: data/storage.json
  llm:
    model: gemini/gemini-2.5-flash
    timeout_seconds: 8
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults apply if omitted)"
    )
    parser.add_argument(
        "--theme", "-t",
        default=RANDOM_THEME,
        help=f"Theme key: {RANDOM_THEME}, {', '.join(WORD_LISTS)} or any theme name for the LLM"
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=DIFFICULTIES,
        default="facil",
        help="Starting difficulty"
    )
    parser.add_argument(
        "--player", "-p",
        default="",
        help="Player name saved with the score"
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use only the bundled word bank"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible grids"
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print the score history and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.offline:
        config.llm.model = None

    storage = JsonFileStorage(config.storage_path) if config.storage_path else MemoryStorage()
    stats = StatsRecorder(storage, storage_key=config.storage_key, limit=config.stats_limit)

    if args.stats:
        print_stats(stats)
        return 0

    machine = RoundStateMachine.create(
        config=config,
        difficulty=args.difficulty,
        theme=args.theme,
        theme_name=args.theme.capitalize(),
        player_name=args.player,
        stats=stats,
        callbacks=HostCallbacks(
            on_exit=lambda: print("Bye!"),
            on_round_complete=lambda points: print(f"Total points: {points}"),
        ),
        seed=args.seed,
    )

    try:
        return asyncio.run(play(machine))
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        machine.exit()
        return 0


if __name__ == "__main__":
    sys.exit(main())
