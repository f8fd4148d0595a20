"""Adjacency listing text format.

A listing has one line per vertex:

    A: (B, 5) (C, 1)
    B: (A, 5)
    C:

The graph's directed/weighted flags are not stored in the listing. They are
supplied by whoever reads it, and they change how it is parsed.
"""

import re
from typing import Dict, Iterable, List, Optional, Tuple

# (src, dst, weight). The weight is None if absent, malformed, or ignored.
PendingEdge = Tuple[str, str, Optional[int]]

GROUP_RE = re.compile(r"\(([^()]*)\)")
FIELD_SEP_RE = re.compile(r"[,\s]+")
INT_RE = re.compile(r"\s*[+-]?\d+\s*")

# Weights are 32-bit signed integers in the listing format.
MIN_WEIGHT = -(2 ** 31)
MAX_WEIGHT = 2 ** 31 - 1


def format_vertex_line(vertex: str, entries: Iterable[Tuple[str, int]]) -> str:
    """Format one listing line, without the line terminator.

    Weights are always written, even for unweighted graphs.
    """
    parts = [f"{vertex}: "]
    for neighbor, weight in entries:
        parts.append(f"({neighbor}, {weight}) ")
    return "".join(parts)


def parse_weight(token: Optional[str]) -> Optional[int]:
    """Parse a weight token.

    Returns None if the token is missing, is not an integer, or does not fit
    in 32 bits.
    """
    if token is None or not INT_RE.fullmatch(token):
        return None
    weight = int(token)
    if not MIN_WEIGHT <= weight <= MAX_WEIGHT:
        return None
    return weight


def split_group(group: str) -> List[str]:
    """Split the inside of a parenthesized group into its fields."""
    return [f for f in FIELD_SEP_RE.split(group) if f]


class Listing:

    """Vertices and edges collected from a listing, ready to be inserted.

    Both collections are insertion-ordered sets. Edges are deduplicated here
    for undirected graphs: an edge is skipped if its exact reverse, including
    the weight, was already collected. Directed listings keep every distinct
    record.
    """

    def __init__(self, directed: bool, weighted: bool):
        self.directed = directed
        self.weighted = weighted
        self.vertices: Dict[str, None] = {}
        self.edges: Dict[PendingEdge, None] = {}

    def __repr__(self) -> str:
        return f"Listing(V={len(self.vertices)}, E={len(self.edges)})"

    def add_line(self, line: str):
        vertex, sep, rest = line.partition(":")
        vertex = vertex.strip()
        self.vertices[vertex] = None
        if not sep:
            return
        for group in GROUP_RE.findall(rest):
            fields = split_group(group)
            if not fields:
                continue
            neighbor = fields[0]
            weight = None
            if self.weighted and len(fields) > 1:
                weight = parse_weight(fields[1])
            self.vertices[neighbor] = None
            if self.directed or (neighbor, vertex, weight) not in self.edges:
                self.edges[(vertex, neighbor, weight)] = None


def parse_listing(lines: Iterable[str], directed: bool, weighted: bool) -> Listing:
    """Collect the vertices and edges of a listing.

    Blank lines are skipped. Nothing is inserted into a graph here; see
    Graph.loads for that.
    """
    listing = Listing(directed, weighted)
    for line in lines:
        # Blank lines would otherwise add a vertex named "".
        if not line.strip():
            continue
        listing.add_line(line)
    return listing
