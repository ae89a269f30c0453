"""
Generation Chart Generator
==========================
Benchmarks puzzle generation across several grid sizes and draws charts of
the results.
Run:  python generate_charts.py --games 5
Output: generation_charts/ folder with 4 PNG files.
"""

import sys
import os
import argparse
import logging
import numpy as np
from typing import Dict, Any, List, Tuple
from collections import defaultdict

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_generation import run_single_game

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────
# Color Palette & Styling
# ──────────────────────────────────────────────────────────────
COLORS = {
    "generate": "#FF6B6B",
    "minimize": "#51CF66",
    "solve":    "#339AF0",
}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"
ACCENT_GOLD = "#E0AF68"


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "axes.titlesize": 16,
        "axes.labelsize": 13,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 11,
        "figure.dpi": 180,
        "savefig.dpi": 180,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


# ──────────────────────────────────────────────────────────────
# Benchmarking Engine
# ──────────────────────────────────────────────────────────────
def run_benchmark(games_per_config: int, configs: List[Tuple[int, int]],
                  seed: int = 1) -> Dict[str, List[Dict[str, Any]]]:
    """
    Generate *games_per_config* puzzles for each (width, height).
    Returns results grouped by size key "WxH".
    """
    results = defaultdict(list)
    total = len(configs) * games_per_config
    done = 0

    for width, height in configs:
        key = f"{width}x{height}"
        for g in range(games_per_config):
            done += 1
            logger.info("[%d/%d] %s game %d/%d", done, total, key, g + 1, games_per_config)
            results[key].append(run_single_game(g + 1, width, height, seed + done))

    return results


# ──────────────────────────────────────────────────────────────
# Chart Generators
# ──────────────────────────────────────────────────────────────
def add_value_labels(ax, bars, fmt="{:.0f}%", offset=1.5):
    """Add value labels on top of bars."""
    for bar in bars:
        h = bar.get_height()
        if h > 0:
            ax.text(bar.get_x() + bar.get_width() / 2, h + offset,
                    fmt.format(h), ha="center", va="bottom",
                    fontsize=9, fontweight="bold", color=TEXT_COLOR)


def _finish(fig, ax, out_dir, filename):
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    path = os.path.join(out_dir, filename)
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved %s", path)


def chart_1_clue_density(results, out_dir):
    """Bar chart: share of cells left as clues after minimization."""
    fig, ax = plt.subplots(figsize=(10, 6))
    configs = list(results.keys())
    x = np.arange(len(configs))

    density = [100 * np.mean([r["clues"] / r["cells"] for r in results[cfg]]) for cfg in configs]
    bars = ax.bar(x, density, 0.5, color=ACCENT_GOLD, edgecolor="none", alpha=0.9, zorder=3)
    add_value_labels(ax, bars, fmt="{:.0f}%", offset=1.0)

    ax.set_xticks(x)
    ax.set_xticklabels(configs)
    ax.set_ylabel("Clues / Cells (%)")
    ax.set_title("Clue Density After Minimization", fontsize=18, pad=15)
    ax.set_ylim(0, 100)
    ax.grid(axis="y", zorder=0)
    _finish(fig, ax, out_dir, "1_clue_density.png")


def chart_2_timing(results, out_dir):
    """Grouped bars: average time per phase for each grid size."""
    fig, ax = plt.subplots(figsize=(10, 6))
    configs = list(results.keys())
    x = np.arange(len(configs))
    width = 0.25

    for i, phase in enumerate(["generate", "minimize", "solve"]):
        times = [np.mean([r[f"{phase}_time"] for r in results[cfg]]) * 1000 for cfg in configs]
        bars = ax.bar(x + i * width, times, width, label=phase.capitalize(),
                      color=COLORS[phase], edgecolor="none", alpha=0.9, zorder=3)
        add_value_labels(ax, bars, fmt="{:.1f}", offset=max(times) * 0.02 + 0.05)

    ax.set_xticks(x + width)
    ax.set_xticklabels(configs)
    ax.set_ylabel("Average Time (ms)")
    ax.set_title("Time per Phase", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    ax.grid(axis="y", zorder=0)
    _finish(fig, ax, out_dir, "2_timing.png")


def chart_3_attempts(results, out_dir):
    """Box plot: generator restarts per grid size."""
    fig, ax = plt.subplots(figsize=(10, 6))
    configs = list(results.keys())
    data = [np.array([r["attempts"] for r in results[cfg]]) for cfg in configs]

    ax.boxplot(data, patch_artist=True,
               boxprops={"facecolor": COLORS["generate"], "alpha": 0.7},
               medianprops={"color": TEXT_COLOR})
    ax.set_xticks(np.arange(1, len(configs) + 1))
    ax.set_xticklabels(configs)
    ax.set_ylabel("Attempts")
    ax.set_title("Generator Attempts per Board", fontsize=18, pad=15)
    ax.grid(axis="y", zorder=0)
    _finish(fig, ax, out_dir, "3_attempts.png")


def chart_4_scalability(results, out_dir):
    """Line chart: solver calls and passes against number of cells."""
    fig, ax = plt.subplots(figsize=(10, 6))
    configs = sorted(results.keys(), key=lambda k: results[k][0]["cells"])
    cells = np.array([results[k][0]["cells"] for k in configs])

    calls = np.array([np.mean([r["solver_calls"] for r in results[k]]) for k in configs])
    passes = np.array([np.mean([r["solver_passes"] for r in results[k]]) for k in configs])

    ax.plot(cells, calls, "o-", label="Solver calls (minimizer)", color=COLORS["minimize"],
            linewidth=2.5, markersize=8, zorder=3)
    ax.plot(cells, passes, "s-", label="Passes to re-solve", color=COLORS["solve"],
            linewidth=2.5, markersize=8, zorder=3)

    ax.set_xlabel("Cells")
    ax.set_ylabel("Count")
    ax.set_title("Scalability: Work vs Grid Size", fontsize=18, pad=15)
    ax.legend()
    ax.grid(True, zorder=0)
    _finish(fig, ax, out_dir, "4_scalability.png")


def print_summary(results):
    print("\nSummary:")
    for cfg, entries in results.items():
        density = 100 * np.mean([e["clues"] / e["cells"] for e in entries])
        attempts = np.mean([e["attempts"] for e in entries])
        ok = sum(1 for e in entries if e["valid_board"] and e["reproduced"])
        print(f"  {cfg:<6}  Clues: {density:5.1f}%  Attempts: {attempts:6.1f}  "
              f"Reproduced: {ok}/{len(entries)}")
    print()


# ──────────────────────────────────────────────────────────────
# Main
# ──────────────────────────────────────────────────────────────
def main():
    parser = argparse.ArgumentParser(description="Generate Fillomino benchmark charts")
    parser.add_argument("--games", type=int, default=5,
                        help="Games per configuration (default: 5)")
    parser.add_argument("--seed", type=int, default=1,
                        help="Base random seed (default: 1)")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: fewer configs for faster testing")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           "generation_charts")
    os.makedirs(out_dir, exist_ok=True)

    setup_style()

    if args.quick:
        configs = [(3, 3), (5, 5)]
    else:
        configs = [(3, 3), (5, 5), (7, 7), (9, 9), (11, 11)]

    results = run_benchmark(args.games, configs, args.seed)

    chart_1_clue_density(results, out_dir)
    chart_2_timing(results, out_dir)
    chart_3_attempts(results, out_dir)
    chart_4_scalability(results, out_dir)

    print_summary(results)
    print(f"Charts saved to: {out_dir}")


if __name__ == "__main__":
    main()
