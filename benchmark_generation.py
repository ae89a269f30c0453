import sys
import os
import time
import csv
import random
import argparse
import logging
import concurrent.futures
from typing import Dict, Any, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from fillomino.board import EMPTY
from fillomino.generators.clue_minimizer import ClueMinimizer
from fillomino.game_state import DEFAULT_PRESET, PRESETS
from fillomino.generators.region_growth_generator import RegionGrowthGenerator
from fillomino.solvers.constraint_solver import ConstraintSolver
from fillomino.validators import is_valid_solution

logger = logging.getLogger(__name__)


def run_single_game(game_id: int, width: int, height: int, seed: int) -> Dict[str, Any]:
    """
    Generates and minimizes one puzzle, then re-solves it from its clues.
    Each game draws from its own random stream so runs can be spread over
    worker processes.
    """
    rng = random.Random(seed)

    start = time.perf_counter()
    generator = RegionGrowthGenerator(width, height, rng)
    solution = generator.generate()
    generate_time = time.perf_counter() - start

    start = time.perf_counter()
    minimizer = ClueMinimizer(solution, width, height)
    clues = minimizer.minimize()
    minimize_time = time.perf_counter() - start

    start = time.perf_counter()
    result = ConstraintSolver(clues, width, height).solve()
    solve_time = time.perf_counter() - start

    return {
        "game_id": game_id,
        "seed": seed,
        "size": f"{width}x{height}",
        "attempts": generator.attempts,
        "largest_region": max(solution),
        "valid_board": is_valid_solution(solution, width, height),
        "clues": sum(1 for v in clues if v != EMPTY),
        "cells": width * height,
        "solver_calls": minimizer.solver_calls,
        "reproduced": result["success"] and result["board"] == solution,
        "solver_passes": result["passes"],
        "generate_time": generate_time,
        "minimize_time": minimize_time,
        "solve_time": solve_time,
        "description": "".join(map(str, clues)),
    }


def run_benchmark(games: int, width: int, height: int, seed: int, workers: int = 1) -> List[Dict[str, Any]]:
    seeds = [seed + i for i in range(games)]
    if workers <= 1:
        return [run_single_game(i + 1, width, height, s) for i, s in enumerate(seeds)]

    with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(run_single_game, i + 1, width, height, s)
            for i, s in enumerate(seeds)
        ]
        results = [f.result() for f in futures]
    return results


def main():
    default_w, default_h = PRESETS[DEFAULT_PRESET]
    parser = argparse.ArgumentParser(description="Benchmark Fillomino puzzle generation")
    parser.add_argument("--games", type=int, default=10, help="Number of puzzles to generate")
    parser.add_argument("--width", type=int, default=default_w, help="Width")
    parser.add_argument("--height", type=int, default=default_h, help="Height")
    parser.add_argument("--seed", type=int, default=1, help="Seed of the first game")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging output")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info("Starting benchmark: %d games, %dx%d", args.games, args.width, args.height)
    results = run_benchmark(args.games, args.width, args.height, args.seed, args.workers)

    keys = results[0].keys()
    with open(args.output, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)

    logger.info("Results saved to %s", args.output)

    n = len(results)
    print("\nSummary Statistics:")
    print(f"{'Metric':<18} | {'Average':>10}")
    print("-" * 32)
    for key in ("attempts", "clues", "solver_calls", "solver_passes",
                "generate_time", "minimize_time", "solve_time"):
        avg = sum(r[key] for r in results) / n
        print(f"{key:<18} | {avg:>10.4f}")

    bad = [r["game_id"] for r in results if not (r["valid_board"] and r["reproduced"])]
    if bad:
        logger.error("Games with an invalid board or failed re-solve: %s", bad)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
