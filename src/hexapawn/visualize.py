"""Visualization utilities for training metrics."""

from typing import Dict, List

import matplotlib.pyplot as plt
import numpy as np


def plot_learning_curves(
    metrics: Dict[str, List],
    title: str = "Hexapawn Training Progress",
    save_path: str | None = None,
) -> None:
    """
    Plot learning curves from training metrics.

    Args:
        metrics: Dictionary of metrics from TrainingMetrics.to_dict()
        title: Plot title
        save_path: Path to save figure (if None, display only)
    """
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(title, fontsize=16, fontweight="bold")

    # Plot 1: Win rates per interval
    ax = axes[0, 0]
    ax.plot(metrics["games"], metrics["white_win_rates"], label="White", linewidth=2)
    ax.plot(metrics["games"], metrics["black_win_rates"], label="Black", linewidth=2)
    ax.set_xlabel("Game")
    ax.set_ylabel("Rate")
    ax.set_title("Win Rate per Interval")
    ax.legend()
    ax.grid(True, alpha=0.3)
    ax.set_ylim([-0.05, 1.05])

    # Plot 2: Cumulative wins
    ax = axes[0, 1]
    ax.plot(metrics["games"], metrics["total_white_wins"], label="White", linewidth=2)
    ax.plot(metrics["games"], metrics["total_black_wins"], label="Black", linewidth=2)
    ax.set_xlabel("Game")
    ax.set_ylabel("Cumulative Wins")
    ax.set_title("Cumulative Game Outcomes")
    ax.legend()
    ax.grid(True, alpha=0.3)

    # Plot 3: Situations seen
    ax = axes[1, 0]
    ax.plot(metrics["games"], metrics["knowledge_sizes"], color="green", linewidth=2)
    ax.set_xlabel("Game")
    ax.set_ylabel("Situations")
    ax.set_title("Knowledge Size")
    ax.grid(True, alpha=0.3)

    # Plot 4: Trusted moves left
    ax = axes[1, 1]
    ax.plot(metrics["games"], metrics["trusted_moves"], color="orange", linewidth=2)
    ax.set_xlabel("Game")
    ax.set_ylabel("Moves")
    ax.set_title("Trusted Moves")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches="tight")
        print(f"Saved plot to {save_path}")
    else:
        plt.show()
    plt.close(fig)


def print_training_summary(metrics: Dict[str, List]) -> None:
    """Print summary statistics from training."""
    if not metrics["games"]:
        print("No training data available.")
        return

    print("\n" + "=" * 60)
    print("TRAINING SUMMARY")
    print("=" * 60)

    print(f"\nGames played: {metrics['games'][-1]}")
    print(f"  White wins:     {metrics['total_white_wins'][-1]}")
    print(f"  Black wins:     {metrics['total_black_wins'][-1]}")
    print(f"  Knowledge size: {metrics['knowledge_sizes'][-1]} situations")
    print(f"  Trusted moves:  {metrics['trusted_moves'][-1]}")

    # Last 20% of intervals
    split_idx = int(len(metrics["games"]) * 0.8)
    if split_idx < len(metrics["games"]):
        avg_white = np.mean(metrics["white_win_rates"][split_idx:])
        avg_black = np.mean(metrics["black_win_rates"][split_idx:])

        print(f"\nLast 20% Average:")
        print(f"  White Win Rate: {avg_white:.1%}")
        print(f"  Black Win Rate: {avg_black:.1%}")

    print("=" * 60 + "\n")
