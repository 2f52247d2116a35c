"""
Visualization of pairwise compatibility for the langmatch CLI.
"""

from __future__ import annotations

import math
from typing import Dict, List, Tuple, TYPE_CHECKING

import numpy as np
import networkx as nx
import matplotlib.pyplot as plt

try:
    from ..matching import can_match, score
except ImportError:
    from matching import can_match, score

try:
    from .helpers import vprint
except ImportError:
    from ui.helpers import vprint

if TYPE_CHECKING:
    from ..models.user import UserProfile


def score_matrix(profiles: Dict[str, "UserProfile"]) -> Tuple[List[str], np.ndarray]:
    """
    Square matrix W where W[i, j] is the score of candidate j for requester i,
    0 where the pair fails the hard filters (and on the diagonal).
    """
    ids = list(profiles.keys())
    W = np.zeros((len(ids), len(ids)), dtype=int)
    for i, a in enumerate(ids):
        for j, b in enumerate(ids):
            if i == j or not can_match(profiles[a], profiles[b]):
                continue
            W[i, j] = score(profiles[a], profiles[b])[0]
    return ids, W


def build_compatibility_graph(profiles: Dict[str, "UserProfile"]) -> nx.Graph:
    """
    Undirected graph of eligible pairs. Hard filters are symmetric but scores
    are not (travel/regional reasons are requester-side), so the edge weight
    is the mean of both directions.
    """
    ids, W = score_matrix(profiles)
    G = nx.Graph()
    for uid in ids:
        G.add_node(uid, native=profiles[uid].native_language, online=profiles[uid].is_online)
    for i in range(len(ids)):
        for j in range(i + 1, len(ids)):
            if can_match(profiles[ids[i]], profiles[ids[j]]):
                G.add_edge(ids[i], ids[j], weight=float(W[i, j] + W[j, i]) / 2.0)
    return G


def show_compatibility_graph(profiles: Dict[str, "UserProfile"]) -> None:
    """Draw eligible pairs; thicker edges mean higher mutual scores."""
    if not profiles:
        print("\n(No users to display.)")
        return

    G = build_compatibility_graph(profiles)
    if G.number_of_edges() == 0:
        print("\nNo eligible pairs to display.")
        return
    vprint(f"\nDrawing {G.number_of_nodes()} users and {G.number_of_edges()} eligible pairs.")

    languages = sorted({d["native"] for _, d in G.nodes(data=True)})
    cmap = plt.get_cmap("tab20")
    node_colors = [cmap(languages.index(d["native"]) % 20) for _, d in G.nodes(data=True)]
    edge_widths = [max(0.8, min(6.0, 0.8 + math.log1p(d["weight"]))) for _, _, d in G.edges(data=True)]
    edge_labels = {(a, b): f"{d['weight']:.0f}" for a, b, d in G.edges(data=True)}

    pos = nx.spring_layout(G, seed=7, weight="weight")
    plt.figure(figsize=(9, 6))
    nx.draw_networkx_nodes(G, pos, node_color=node_colors, node_size=900)
    nx.draw_networkx_labels(G, pos, font_size=8)
    nx.draw_networkx_edges(G, pos, width=edge_widths, edge_color="gray")
    nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, font_size=7)
    plt.title("Eligible pairs (edge label = mean compatibility score)")
    plt.axis("off")
    plt.tight_layout()
    plt.show()
