#!/usr/bin/env python3
"""
Town Builder Runner

Score stored boards, list the buildings that can be built on them, or play
a solo town turn by turn. Select an action from the menu or pass
``--action`` on the command line.
"""

import argparse

from config_models import BatchScoringFile, DeckConfiguration
from core.enums.resource import ALL_RESOURCES
from core.errors import TownError
from engine.town_game import TownGame
from logging_utils import log_error, log_info, log_success
from parallel_scorer import load_batch, print_summary, run_parallel_scoring

DEFAULT_DECK = DeckConfiguration(
    red="Farm",
    gray="Well",
    yellow="Theater",
    green="Tavern",
    orange="Chapel",
    black="Factory",
    monument="Cathedral of Caterina",
)


def print_banner():
    """Print welcome banner."""
    print("=" * 60)
    print(" 🏘️  TOWN BUILDER - Scoring and Play Runner")
    print("=" * 60)
    print()


def print_menu():
    """Display available actions."""
    print("Available Actions:")
    print("─" * 30)
    print("1. Score boards")
    print("   - Score every board of a JSON file against its deck")
    print()
    print("2. Show available builds")
    print("   - List the pattern matches on every board of a JSON file")
    print()
    print("3. Play a solo town")
    print("   - Place resources and construct buildings turn by turn")
    print()
    print("4. Parallel scorer")
    print("   - Score a large JSON file of boards concurrently")
    print()
    print("0. Exit")
    print("─" * 30)


def ask_file(default: str = "boards.json") -> str:
    path = input(f"Enter JSON file path (default: {default}): ").strip()
    return path or default


def print_board(game: TownGame):
    print(game.board.pretty_print())


def run_score_boards(json_file: str | None = None) -> bool:
    """Score every board in a batch file, one after the other."""
    json_file = json_file or ask_file()
    try:
        batch = load_batch(json_file)
    except (OSError, ValueError) as e:
        log_error(f"Could not load {json_file}: {e}")
        return False

    registry = batch.deck.build_registry()
    for snapshot in batch.boards:
        game = TownGame(registry, board=snapshot.to_board())
        result = game.score(finish_rank=snapshot.finish_rank, rival_counts=snapshot.rival_counts)
        print(f"\n{snapshot.name}")
        print("─" * 40)
        print_board(game)
        for line in result.summary_lines():
            print(f"  {line}")
    return True


def run_show_matches(json_file: str | None = None) -> bool:
    """Print the buildable patterns on every board in a batch file."""
    json_file = json_file or ask_file()
    try:
        batch = load_batch(json_file)
    except (OSError, ValueError) as e:
        log_error(f"Could not load {json_file}: {e}")
        return False

    registry = batch.deck.build_registry()
    for snapshot in batch.boards:
        game = TownGame(registry, board=snapshot.to_board())
        matches = game.scan_for_matches()
        print(f"\n{snapshot.name}: {len(matches)} matches")
        for match in matches:
            cells = ", ".join(pos.key for pos in match.coordinates())
            print(f"  {match.building_name} at {match.row},{match.col} using {cells}")
    return True


def _read_coordinates(prompt: str) -> tuple[int, int] | None:
    raw = input(prompt).strip()
    try:
        row, col = (int(part) for part in raw.split(","))
    except ValueError:
        log_error("Enter coordinates as row,col")
        return None
    return row, col


def _play_turn(game: TownGame) -> bool:
    """Play one turn; returns False when the player stops."""
    options = ", ".join(r.value.lower() for r in ALL_RESOURCES)
    resource = input(f"Resource ({options}), 'u' to undo, 'q' to stop: ").strip().upper()
    if resource == "Q":
        return False
    if resource == "U":
        game.undo()
        return True
    game.select_resource(resource)
    coords = _read_coordinates("Place at row,col: ")
    if coords is None:
        return True
    game.place_resource(*coords)

    if not game.available_matches:
        return True
    print("Buildable:")
    for i, match in enumerate(game.available_matches):
        print(f"  {i + 1}. {match.building_name} at {match.row},{match.col}")
    choice = input("Build which (Enter to skip)? ").strip()
    if not choice.isdigit() or not 1 <= int(choice) <= len(game.available_matches):
        return True
    match = game.available_matches[int(choice) - 1]
    target = _read_coordinates("Place the building at row,col: ")
    if target is None:
        return True
    effect = game.construct(match, *target)
    if effect is not None:
        log_info(f"{effect.value} effect is waiting to be resolved")
    return True


def run_solo_game() -> bool:
    """Play a town with the default deck until the board is full."""
    registry = DEFAULT_DECK.build_registry()
    game = TownGame(registry)
    log_info(f"Deck: {', '.join(registry.names())}")

    while not game.is_game_over():
        print()
        print_board(game)
        try:
            if not _play_turn(game):
                break
        except (TownError, ValueError) as e:
            log_error(str(e))

    result = game.score()
    log_success(f"Final score: {result.total}")
    for line in result.summary_lines():
        print(f"  {line}")
    return True


def run_parallel_scorer(json_file: str | None = None) -> bool:
    """Run the thread-pool scorer over a batch file."""
    json_file = json_file or ask_file()

    try:
        concurrency_input = input("Enter max concurrency (default 4): ").strip()
        concurrency = int(concurrency_input) if concurrency_input else 4
    except ValueError:
        concurrency = 4

    try:
        batch: BatchScoringFile = load_batch(json_file)
    except (OSError, ValueError) as e:
        log_error(f"Could not load {json_file}: {e}")
        return False

    results = run_parallel_scoring(batch, concurrency)
    print_summary(results)
    return all(r["success"] for r in results)


def get_user_choice() -> int | None:
    """Get user's action choice."""
    try:
        choice = input("Enter your choice (0-4): ").strip()
        return int(choice) if choice.isdigit() else None
    except (ValueError, KeyboardInterrupt):
        return None


def main():
    """Main runner function."""
    parser = argparse.ArgumentParser(description="Town Builder Runner")
    parser.add_argument("--action", type=int, choices=[1, 2, 3, 4], help="Run an action directly (1-4)")
    parser.add_argument("--file", help="JSON file with a deck and boards, for actions 1, 2 and 4")
    args = parser.parse_args()

    print_banner()

    actions = {
        1: lambda: run_score_boards(args.file),
        2: lambda: run_show_matches(args.file),
        3: run_solo_game,
        4: lambda: run_parallel_scorer(args.file),
    }

    if args.action:
        actions[args.action]()
        return

    while True:
        print_menu()
        choice = get_user_choice()

        if choice == 0:
            print("\n👋 Goodbye!")
            break
        if choice in actions:
            actions[choice]()
        else:
            print("❌ Invalid choice. Please enter a number from 0-4.")

        print("\n" + "=" * 60)
        input("Press Enter to continue...")
        print("\n")


if __name__ == "__main__":
    main()
