"""Degree distribution chart export."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from netinsight.log_config import get_logger  # noqa: E402

logger = get_logger(__name__)


def export_degree_histogram(
    histogram: Mapping[int, int],
    output_path: Path,
    title: str = "Degree Distribution",
    dpi: int = 120,
) -> Path:
    """Save a bar chart of a degree histogram as PNG.

    Args:
        histogram: Degree -> node count, as from ``degree_histogram``.
        output_path: Destination file.
        title: Chart title.
        dpi: Output resolution.

    Returns:
        The written path.

    Raises:
        ValueError: If the histogram is empty.
        RuntimeError: If the figure cannot be saved.
    """
    output_path = Path(output_path)
    if not histogram:
        raise ValueError("Cannot plot degree distribution: histogram is empty")

    degrees = sorted(histogram)
    counts = [histogram[d] for d in degrees]
    fig = None
    try:
        fig, ax = plt.subplots(figsize=(8, 5))
        ax.bar(
            [str(d) for d in degrees],
            counts,
            color=(75 / 255, 192 / 255, 192 / 255, 0.7),
            edgecolor=(75 / 255, 192 / 255, 192 / 255, 1.0),
            linewidth=1,
            label="Degree Distribution",
        )
        ax.set_xlabel("Degree")
        ax.set_ylabel("Nodes")
        ax.set_ylim(bottom=0)
        ax.set_title(title)
        ax.legend()
        plt.tight_layout()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=int(dpi), format="png")
    except Exception as e:
        if output_path.exists():
            output_path.unlink()
            logger.debug(f"Cleaned up partial file: {output_path}")
        raise RuntimeError(f"Failed to save degree histogram to {output_path}: {e}") from e
    finally:
        if fig is not None:
            plt.close(fig)

    logger.info(f"Saved degree histogram → {output_path}")
    return output_path
