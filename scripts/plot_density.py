#!/usr/bin/env python3
"""
Plot the share of bipartite graphs per density bucket.

Runs the density simulation and saves a bar chart into ./build/

Usage:
    uv run python scripts/plot_density.py --samples 5000 --seed 42
"""

import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from bipartite_density import DensitySimulation

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"


def plot(simulation, ax):
    """Draw bipartite fraction per bucket with sample counts as labels."""
    buckets = simulation.buckets
    ratios = simulation.ratios()
    labels = [f"{b.lower:g}-{b.upper:g}%" for b in buckets]

    bars = ax.bar(labels, ratios, color="steelblue", edgecolor="white")
    for bar, bucket in zip(bars, buckets):
        ax.annotate(
            f"{bucket.bipartite}/{bucket.total}",
            (bar.get_x() + bar.get_width() / 2, bar.get_height()),
            ha="center",
            va="bottom",
            fontsize=8,
        )

    ax.set_ylim(0, 1.05)
    ax.set_xlabel("Density")
    ax.set_ylabel("Bipartite fraction")
    ax.set_title(f"Bipartiteness by density ({simulation.samples} samples)", fontweight="bold")


def main():
    parser = argparse.ArgumentParser(description="Plot bipartiteness by density")
    parser.add_argument("--samples", type=int, default=1000, help="Samples to record")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", default="density.png", help="File name inside build/")
    args = parser.parse_args()

    simulation = DensitySimulation(sample_count=args.samples, random_seed=args.seed).run()

    BUILD_DIR.mkdir(exist_ok=True)
    fig, ax = plt.subplots(figsize=(8, 5))
    plot(simulation, ax)
    fig.tight_layout()

    path = BUILD_DIR / args.output
    fig.savefig(path, dpi=150)
    plt.close(fig)
    print(f"Saved {path}")


if __name__ == "__main__":
    main()
