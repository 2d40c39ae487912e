#!/usr/bin/env python3
"""
Parallel scoring of many town boards.

Reads a ``BatchScoringFile`` JSON (a deck plus named boards), scores each
board on a worker thread and prints a summary. Boards share nothing but the
read-only registry, so they can be scored in any order.

Usage:
    python parallel_scorer.py boards.json -c 8
"""

import argparse
import concurrent.futures
import sys
from datetime import datetime
from pathlib import Path

from config_models import BatchScoringFile, BoardSnapshot
from core.models.registry import BuildingRegistry
from engine.score_manager import calculate_score
from logging_utils import log_error, log_info, log_success


def score_snapshot(snapshot: BoardSnapshot, registry: BuildingRegistry, board_index: int) -> dict:
    """Score one board and package the outcome for the summary."""
    try:
        board = snapshot.to_board()
        result = calculate_score(
            board.snapshot(),
            board.metadata_snapshot(),
            registry,
            finish_rank=snapshot.finish_rank,
            rival_counts=snapshot.rival_counts,
        )
        return {
            "board_index": board_index,
            "name": snapshot.name,
            "success": True,
            "result": result,
        }
    except Exception as e:
        return {
            "board_index": board_index,
            "name": snapshot.name,
            "success": False,
            "error": str(e),
        }


def load_batch(json_file_path: str | Path) -> BatchScoringFile:
    return BatchScoringFile.model_validate_json(Path(json_file_path).read_text())


def run_parallel_scoring(batch: BatchScoringFile, max_concurrency: int = 4) -> list[dict]:
    """
    Score every board of ``batch`` using a thread pool.

    Args:
        batch: Deck and boards to score
        max_concurrency: Maximum number of boards scored at the same time

    Returns:
        One result dict per board, in the order the boards were given
    """
    registry = batch.deck.build_registry()
    log_info(f"Deck: {', '.join(registry.names())}")
    log_info(f"Scoring {len(batch.boards)} boards with {max_concurrency} workers at {datetime.now()}")

    results = []
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_concurrency) as executor:
        future_to_index = {
            executor.submit(score_snapshot, snapshot, registry, i): i for i, snapshot in enumerate(batch.boards)
        }

        for future in concurrent.futures.as_completed(future_to_index):
            result = future.result()
            results.append(result)
            if result["success"]:
                log_success(f"{result['name']}: {result['result'].total} points")
            else:
                log_error(f"{result['name']} failed: {result['error']}")

    results.sort(key=lambda r: r["board_index"])
    return results


def print_summary(results: list[dict]) -> None:
    successful = [r for r in results if r["success"]]

    print(f"\n{'=' * 60}")
    print("PARALLEL SCORING SUMMARY")
    print(f"{'=' * 60}")
    print(f"Total boards: {len(results)}")
    print(f"Successful: {len(successful)}")
    print(f"Failed: {len(results) - len(successful)}")

    if successful:
        print("\nScores:")
        for r in successful:
            result = r["result"]
            print(f"  {r['name']}: {result.total} (penalty {result.penalty_count})")
        best = max(successful, key=lambda r: r["result"].total)
        print(f"\nBest board: {best['name']} with {best['result'].total} points")
    print(f"{'=' * 60}")


def main():
    parser = argparse.ArgumentParser(description="Score town boards in parallel")
    parser.add_argument("json_file", help="Path to a JSON file with a deck and a list of boards")
    parser.add_argument(
        "--concurrency",
        "-c",
        type=int,
        default=4,
        help="Maximum number of boards scored in parallel (default: 4)",
    )
    args = parser.parse_args()

    try:
        batch = load_batch(args.json_file)
    except (OSError, ValueError) as e:
        log_error(f"Could not load {args.json_file}: {e}")
        sys.exit(1)

    results = run_parallel_scoring(batch, args.concurrency)
    print_summary(results)

    successful = sum(1 for r in results if r["success"])
    if successful == 0 and results:
        sys.exit(1)  # All failed
    elif successful < len(results):
        sys.exit(2)  # Some failed
    sys.exit(0)


if __name__ == "__main__":
    main()
