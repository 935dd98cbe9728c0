import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np


def plot_distance_matrix(
    graph,
    out_png,
    title="Shortest-Path Distances"
):
    """
    Heat map of the distance matrix. Unreachable pairs stay blank.
    """
    if graph.node_count == 0:
        raise ValueError("Cannot plot the distance matrix of an empty graph")

    dist = np.array(
        [[np.nan if d is None else d for d in row] for row in graph.distance_matrix],
        dtype=float,
    ).reshape(graph.node_count, graph.node_count)
    masked = np.ma.masked_invalid(dist)

    fig, ax = plt.subplots(figsize=(7, 6))

    cmap = plt.get_cmap("viridis").with_extremes(bad="white")
    im = ax.imshow(masked, cmap=cmap, interpolation="nearest")

    cbar = fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label("Distance", rotation=90)

    # Per-node ticks only where they stay readable
    if graph.node_count <= 30:
        ax.set_xticks(range(graph.node_count))
        ax.set_yticks(range(graph.node_count))

    ax.set_title(title)
    ax.set_xlabel("Node")
    ax.set_ylabel("Node")

    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    plt.close(fig)
