"""Adjacency-list graph structure."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, TextIO, Union

from adjlist.listing import format_vertex_line, parse_listing


class GraphIOError(Exception):
    """An error that occurs while saving or loading a listing."""


class Entry:

    """An adjacency entry: one outgoing edge (or arc) to a neighbor.

    Entries are immutable, so graphs and their copies can share them.
    """

    __slots__ = ("neighbor", "weight")

    def __init__(self, neighbor: str, weight: int = 1):
        object.__setattr__(self, "neighbor", neighbor)
        object.__setattr__(self, "weight", weight)

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"cannot set {name!r}: Entry is immutable")

    def __delattr__(self, name: str):
        raise AttributeError(f"cannot delete {name!r}: Entry is immutable")

    def __repr__(self) -> str:
        return f"Entry({self.neighbor!r}, {self.weight!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.neighbor == other.neighbor and self.weight == other.weight

    def __hash__(self) -> int:
        return hash((self.neighbor, self.weight))

    def __iter__(self) -> Iterator[Any]:
        yield self.neighbor
        yield self.weight


class Edge:

    """An edge reported by Graph.get_edges."""

    __slots__ = ("src", "dst", "weight")

    def __init__(self, src: str, dst: str, weight: int):
        self.src = src
        self.dst = dst
        self.weight = weight

    def __repr__(self) -> str:
        return f"Edge({self.src!r}, {self.dst!r}, {self.weight!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.src == other.src
            and self.dst == other.dst
            and self.weight == other.weight
        )

    def __hash__(self) -> int:
        return hash((self.src, self.dst, self.weight))


class Graph:

    """A graph stored as a mapping from vertex to its adjacency entries.

    The directed and weighted flags are fixed at construction.

    * directed: if false, add_edge mirrors every edge into the other endpoint
      and remove_edge removes both directions.
    * weighted: never restricts what is stored. It only controls whether
      weights are read when loading a listing (otherwise they default to 1)
      and whether they are shown by dump.

    Entries keep their insertion order, and adding the same edge twice stores
    it twice. Only loading deduplicates (see adjlist.listing.Listing).
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        self._directed = directed
        self._weighted = weighted
        self.adjacency: Dict[str, List[Entry]] = {}

    @staticmethod
    def from_file(
        path: Union[str, Path], directed: bool = False, weighted: bool = False
    ) -> Graph:
        """Create a graph from a listing file.

        Raises GraphIOError if the file cannot be read.
        """
        graph = Graph(directed, weighted)
        graph.load(path)
        return graph

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def weighted(self) -> bool:
        return self._weighted

    def __repr__(self) -> str:
        return (
            f"Graph(N={len(self.adjacency)}, "
            f"directed={self.directed}, weighted={self.weighted})"
        )

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adjacency

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.directed == other.directed
            and self.weighted == other.weighted
            and self.adjacency == other.adjacency
        )

    def copy(self) -> Graph:
        """Return an independent copy of this graph."""
        other = Graph(self.directed, self.weighted)
        other.adjacency = {v: list(es) for v, es in self.adjacency.items()}
        return other

    __copy__ = copy

    def __deepcopy__(self, memo: Dict[int, Any]) -> Graph:
        return self.copy()

    @property
    def vertices(self) -> List[str]:
        return list(self.adjacency)

    def neighbors(self, vertex: str) -> List[Entry]:
        """Return a copy of the vertex's adjacency entries.

        Raises KeyError if the vertex does not exist.
        """
        return list(self.adjacency[vertex])

    def add_vertex(self, vertex: str) -> bool:
        """Add a vertex with no edges.

        Returns false (and changes nothing) if it already exists.
        """
        if vertex in self.adjacency:
            logging.debug("vertex %s already exists", vertex)
            return False
        self.adjacency[vertex] = []
        logging.debug("added vertex %s", vertex)
        return True

    def add_edge(self, src: str, dst: str, weight: int = 1):
        """Add an edge from src to dst, creating missing vertices.

        Undirected graphs also get the mirrored entry, even for self-loops.
        """
        if src not in self.adjacency:
            self.add_vertex(src)
        if dst not in self.adjacency:
            self.add_vertex(dst)
        self.adjacency[src].append(Entry(dst, weight))
        if not self.directed:
            self.adjacency[dst].append(Entry(src, weight))
        logging.debug("added edge %s -> %s (%s)", src, dst, weight)

    def remove_vertex(self, vertex: str) -> bool:
        """Remove a vertex and every entry pointing at it.

        Returns false (and changes nothing) if it does not exist.
        """
        if vertex not in self.adjacency:
            logging.debug("vertex %s does not exist", vertex)
            return False
        del self.adjacency[vertex]
        for entries in self.adjacency.values():
            entries[:] = [e for e in entries if e.neighbor != vertex]
        logging.debug("removed vertex %s", vertex)
        return True

    def remove_edge(self, src: str, dst: str) -> int:
        """Remove all edges between src and dst.

        Parallel edges are all removed, whatever their weights. Returns the
        number of entries removed, counting mirrored ones.
        """
        removed = self._remove_entries(src, dst)
        if not self.directed:
            removed += self._remove_entries(dst, src)
        logging.debug("removed %d entries between %s and %s", removed, src, dst)
        return removed

    def _remove_entries(self, vertex: str, neighbor: str) -> int:
        entries = self.adjacency.get(vertex)
        if entries is None:
            return 0
        before = len(entries)
        entries[:] = [e for e in entries if e.neighbor != neighbor]
        return before - len(entries)

    def get_edges(self) -> List[Edge]:
        """Return the edges of the graph.

        For undirected graphs, an entry is skipped if an edge going the other
        way between the same two vertices was already reported. Weights are
        not compared, so this is looser than the deduplication done on load.
        """
        edges: List[Edge] = []
        for vertex, entries in self.adjacency.items():
            for entry in entries:
                if self.directed or not any(
                    e.src == entry.neighbor and e.dst == vertex for e in edges
                ):
                    edges.append(Edge(vertex, entry.neighbor, entry.weight))
        return edges

    def dump(self, out: TextIO = sys.stdout):
        """Dump the adjacency list to out, with weights only if weighted."""
        for vertex, entries in self.adjacency.items():
            if self.weighted:
                items = (f"({e.neighbor}, {e.weight})" for e in entries)
            else:
                items = (e.neighbor for e in entries)
            print(f"{vertex}: " + " ".join(items), file=out)

    def dumps(self) -> str:
        """Return the graph as a listing."""
        return "".join(
            format_vertex_line(v, es) + "\n" for v, es in self.adjacency.items()
        )

    def save(self, path: Union[str, Path]):
        """Save the graph as a listing file.

        Raises GraphIOError if the file cannot be written.
        """
        logging.info("saving %r to %s", self, path)
        try:
            with open(path, "w") as f:
                f.write(self.dumps())
        except OSError as ex:
            raise GraphIOError(f"cannot write {path}: {ex.strerror}") from ex

    def load(self, path: Union[str, Path]):
        """Replace the graph's contents with a listing file.

        The whole file is read before anything is cleared, so the graph is
        unchanged if this raises GraphIOError.
        """
        logging.info("loading %s", path)
        try:
            with open(path) as f:
                lines = f.readlines()
        except OSError as ex:
            raise GraphIOError(f"cannot read {path}: {ex.strerror}") from ex
        except UnicodeDecodeError as ex:
            raise GraphIOError(f"cannot read {path}: {ex.reason}") from ex
        self.load_lines(lines)

    def loads(self, text: str):
        """Replace the graph's contents with a listing string."""
        self.load_lines(text.splitlines())

    def load_lines(self, lines: Iterable[str]):
        """Replace the graph's contents with the given listing lines.

        Missing or malformed weights become 1. Weights are ignored entirely
        for unweighted graphs.
        """
        listing = parse_listing(lines, self.directed, self.weighted)
        logging.debug("parsed %r", listing)
        self.adjacency = {}
        for vertex in listing.vertices:
            self.add_vertex(vertex)
        for src, dst, weight in listing.edges:
            if self.weighted:
                self.add_edge(src, dst, 1 if weight is None else weight)
            else:
                self.add_edge(src, dst)
