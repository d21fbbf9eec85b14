"""
Benchmark Chart Generator
=========================
Generates charts of the concurrent chunk sort against the built-in sort.
Run:  python generate_charts.py --sizes 1000 10000 100000
Output: charts/ folder with 3 PNG files.
"""

import sys
import os
import argparse
import numpy as np
from typing import Dict, Any, List

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_sort import DEFAULT_SIZES, run_benchmark

# ───────────────────────────────────────────────────────────
# Color Palette & Styling
# ───────────────────────────────────────────────────────────
COLORS = {
    "sorted":     "#FF6B6B",   # Coral Red
    "builtin":    "#51CF66",   # Emerald Green
    "merge_sort": "#339AF0",   # Sky Blue
}
LABELS = {"sorted": "sorted()", "builtin": "Chunked (list.sort)", "merge_sort": "Chunked (merge sort)"}
STAGE_COLORS = {"partition": "#E0AF68", "sort": "#339AF0", "merge": "#51CF66"}
BG_COLOR = "#1A1B26"
CARD_COLOR = "#24283B"
TEXT_COLOR = "#C0CAF5"
GRID_COLOR = "#414868"


def setup_style():
    """Apply a dark matplotlib style."""
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
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 11,
        "figure.dpi": 120,
        "savefig.dpi": 120,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def _finish(ax):
    ax.grid(True, zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)


def chart_1_total_time(results: List[Dict[str, Any]], out_dir: str) -> str:
    """Log-log line chart: total time vs N for every algorithm."""
    fig, ax = plt.subplots(figsize=(10, 6))
    ns = np.array([r["n"] for r in results])

    for tag in ["sorted", "builtin", "merge_sort"]:
        key = "sorted_ms" if tag == "sorted" else f"{tag}_total_ms"
        times = np.array([r[key] for r in results])
        ax.plot(ns, times, "o-", label=LABELS[tag], color=COLORS[tag],
                linewidth=2.5, markersize=8, zorder=3)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Input size N")
    ax.set_ylabel("Time (ms)")
    ax.set_title("Total Sort Time vs Input Size", pad=15)
    ax.legend(loc="upper left")
    _finish(ax)

    path = os.path.join(out_dir, "1_total_time.png")
    fig.savefig(path)
    plt.close(fig)
    print("  ✓ Chart 1: Total Time")
    return path


def chart_2_stage_breakdown(results: List[Dict[str, Any]], out_dir: str,
                            algorithm: str = "builtin") -> str:
    """Stacked bars: share of partition / sort / merge per N."""
    fig, ax = plt.subplots(figsize=(10, 6))
    labels = [str(r["n"]) for r in results]
    x = np.arange(len(results))
    bottom = np.zeros(len(results))

    for stage in ["partition", "sort", "merge"]:
        stage_ms = np.array([r[f"{algorithm}_{stage}_ms"] for r in results])
        totals = np.array([max(r[f"{algorithm}_total_ms"], 1e-9) for r in results])
        share = 100.0 * stage_ms / totals
        ax.bar(x, share, 0.6, bottom=bottom, label=stage,
               color=STAGE_COLORS[stage], edgecolor="none", alpha=0.9, zorder=3)
        bottom += share

    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_xlabel("Input size N")
    ax.set_ylabel("Share of pipeline time (%)")
    ax.set_ylim(0, 105)
    ax.set_title(f"Stage Breakdown ({LABELS[algorithm]})", pad=15)
    ax.legend(loc="upper right")
    _finish(ax)

    path = os.path.join(out_dir, "2_stage_breakdown.png")
    fig.savefig(path)
    plt.close(fig)
    print("  ✓ Chart 2: Stage Breakdown")
    return path


def chart_3_chunk_count(results: List[Dict[str, Any]], out_dir: str) -> str:
    """Chunk count vs N, with the ceil(sqrt(N)) curve for reference."""
    fig, ax = plt.subplots(figsize=(10, 6))
    ns = np.array([r["n"] for r in results])
    chunks = np.array([r["chunks"] for r in results])
    curve_n = np.geomspace(max(ns.min(), 1), ns.max(), 200)

    ax.plot(curve_n, np.maximum(4, np.ceil(np.sqrt(curve_n))), "-",
            color=GRID_COLOR, linewidth=1.5, label="max(4, ceil(sqrt(N)))", zorder=2)
    ax.plot(ns, chunks, "o", color=COLORS["builtin"], markersize=9,
            label="chunks used", zorder=3)

    ax.set_xscale("log")
    ax.set_xlabel("Input size N")
    ax.set_ylabel("Number of chunks / threads")
    ax.set_title("Chunk Count vs Input Size", pad=15)
    ax.legend(loc="upper left")
    _finish(ax)

    path = os.path.join(out_dir, "3_chunk_count.png")
    fig.savefig(path)
    plt.close(fig)
    print("  ✓ Chart 3: Chunk Count")
    return path


def generate_all(results: List[Dict[str, Any]], out_dir: str) -> List[str]:
    os.makedirs(out_dir, exist_ok=True)
    setup_style()
    return [
        chart_1_total_time(results, out_dir),
        chart_2_stage_breakdown(results, out_dir),
        chart_3_chunk_count(results, out_dir),
    ]


def main():
    parser = argparse.ArgumentParser(description="Generate Benchmark Charts")
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES,
                        help="Input sizes to benchmark")
    parser.add_argument("--repeats", type=int, default=3,
                        help="Runs per size, best is kept (default: 3)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "charts")

    print("Phase 1/2: Running Benchmarks...")
    results = run_benchmark(args.sizes, args.repeats, args.seed)

    print("\nPhase 2/2: Generating Charts...")
    paths = generate_all(results, out_dir)

    print(f"All {len(paths)} charts saved to: {out_dir}")


if __name__ == "__main__":
    main()
