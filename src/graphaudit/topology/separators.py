"""Removal-and-recount detection of articulation points and bridges.

Each candidate (node or edge) is removed from a copy of the graph and the
connected components of the copy are counted. A candidate whose removal
increases the count separates the graph.

The parallel variants submit one unit of work per node to a thread pool.
Every unit gets its node index as a call argument and returns its own
findings; the caller merges them once all units have settled. The baseline
graph is immutable, so units share it without locking.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from itertools import chain
from typing import Iterator, List, Optional

from graphaudit.topology.graph import Bridge, Graph

logger = logging.getLogger(__name__)


def _separates_node(graph: Graph, baseline: int, node: int) -> Optional[int]:
    if graph.remove_node(node).component_count() > baseline:
        return node
    return None


def _row_bridges(graph: Graph, baseline: int, node1: int) -> Iterator[Bridge]:
    # Lower triangle only: every undirected edge appears once here.
    for node2 in range(node1 + 1):
        if graph.weight(node1, node2) <= 0:
            continue
        if graph.remove_edge(node1, node2).component_count() > baseline:
            yield (node2, node1)


def articulation_points(graph: Graph) -> Iterator[int]:
    """Yield articulation points in ascending node order."""
    baseline = graph.component_count()
    logger.debug("Articulation scan over %d node(s), baseline %d component(s)", graph.node_count, baseline)
    for node in graph.nodes:
        if _separates_node(graph, baseline, node) is not None:
            yield node


def articulation_points_parallel(graph: Graph, max_workers: Optional[int] = None) -> List[int]:
    """Articulation points computed with one pool task per node.

    Returns the same members as :func:`articulation_points`, ascending.
    The first exception raised by a task is re-raised here.
    """
    baseline = graph.component_count()
    logger.debug("Dispatching %d articulation probe(s), baseline %d component(s)", graph.node_count, baseline)
    probe = partial(_separates_node, graph, baseline)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(probe, graph.nodes))
    return [node for node in results if node is not None]


def bridges(graph: Graph) -> Iterator[Bridge]:
    """Yield bridges as (smaller, larger) pairs in lower-triangle scan order."""
    baseline = graph.component_count()
    logger.debug("Bridge scan over %d edge(s), baseline %d component(s)", graph.edge_count, baseline)
    for node1 in graph.nodes:
        yield from _row_bridges(graph, baseline, node1)


def bridges_parallel(graph: Graph, max_workers: Optional[int] = None) -> List[Bridge]:
    """Bridges computed with one pool task per adjacency row.

    Each task scans its own row of the lower triangle and returns a list;
    the lists are concatenated in row order, so the result matches
    :func:`bridges` element for element.
    """
    baseline = graph.component_count()
    logger.debug("Dispatching %d bridge row scan(s), baseline %d component(s)", graph.node_count, baseline)

    def scan_row(node1: int) -> List[Bridge]:
        return list(_row_bridges(graph, baseline, node1))

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        rows = list(executor.map(scan_row, graph.nodes))
    return list(chain.from_iterable(rows))
