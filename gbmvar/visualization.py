"""Visualization utilities for plotting simulated paths and risk bands."""

import matplotlib
# Use non-interactive backend for headless environments
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from typing import Optional
from pathlib import Path
from gbmvar.model import SimulationResult


def plot_simulation(
    result: SimulationResult,
    output_path: Optional[str] = None,
    show_plot: bool = True,
    max_paths: int = 100,
) -> None:
    """Plot a fan chart of the simulated paths.

    Parameters
    ----------
    result : SimulationResult
        Completed simulation
    output_path : str, optional
        Path to save the plot. If None, plot is not saved.
    show_plot : bool, default=True
        Whether to display the plot
    max_paths : int, default=100
        Maximum number of individual paths drawn
    """
    days = np.arange(result.horizon_days + 1)
    initial_price = float(result.mean_path[0])

    fig, ax = plt.subplots(figsize=(12, 8), dpi=150)

    # Evenly spaced sample of paths (with transparency)
    num_drawn = min(max_paths, result.iteration_count)
    if num_drawn > 0:
        sample = np.linspace(0, result.iteration_count - 1, num_drawn).astype(int)
        ax.plot(days, result.paths[sample].T, alpha=0.1, color='blue', linewidth=0.5)

    ax.fill_between(
        days,
        result.p5_path,
        result.p95_path,
        alpha=0.2,
        color='blue',
        label='5%-95% Band',
    )
    ax.plot(days, result.mean_path, color='darkblue', linewidth=2, label='Mean Path')
    ax.axhline(
        y=initial_price,
        color='red',
        linestyle='--',
        linewidth=1.5,
        label=f'Initial Price: ${initial_price:.2f}',
    )

    ax.set_title(
        f"GBM Simulation: {result.iteration_count} paths over {result.horizon_days} days | "
        f"VaR 95%: ${result.var_95_amount:.2f} ({result.var_95_percent:.2f}%)",
        fontsize=14,
        fontweight='bold',
    )
    ax.set_xlabel('Trading Days', fontsize=12)
    ax.set_ylabel('Price ($)', fontsize=12)
    ax.legend(loc='best', fontsize=9)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if output_path:
        output_path_abs = Path(output_path).resolve()
        output_path_abs.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(str(output_path_abs), dpi=300, bbox_inches='tight')

    if show_plot:
        plt.show()
    else:
        plt.close(fig)
