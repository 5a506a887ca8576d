"""IndoorGraph: cell spaces as nodes, transitions as edges."""

from dataclasses import dataclass
from typing import Iterator

import networkx as nx


@dataclass(eq=False)
class Node:
    """A cell space in the graph.

    Nodes compare by identity. Edges hold references to them, so a position
    assigned by the layout is visible through every edge.
    """

    id: str
    label: str
    position: tuple[float, float] | None = None

    @property
    def key(self) -> str:
        """The cross-reference key ('#' + id) this node is stored under."""
        return f"#{self.id}"


@dataclass(frozen=True, eq=False)
class Edge:
    """A transition between two cell spaces."""

    from_node: Node
    to_node: Node
    transition_id: str | None = None

    @property
    def is_self_loop(self) -> bool:
        """Check if both endpoints are the same cell space."""
        return self.from_node is self.to_node


class IndoorGraph:
    """A graph of the cell spaces and transitions in an IndoorGML document.

    Nodes live in an insertion-ordered mapping keyed by '#' + id; the order
    is the document order of the cell spaces and drives the layout. Edges
    are kept in a list in transition document order.
    """

    def __init__(self):
        """Initialize an empty graph."""
        self.nodes: dict[str, Node] = {}
        self.edges: list[Edge] = []

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    @property
    def is_empty(self) -> bool:
        """Check if the graph has no nodes."""
        return not self.nodes

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_cell_space(self, cell_id: str, label: str | None = None) -> Node:
        """Add a cell space node, keeping the first one registered under an id.

        Args:
            cell_id: The cell space gml:id.
            label: Display label; the id is used when empty or missing.

        Returns:
            The node stored under the id, which is the existing node if
            the id was already registered.
        """
        key = f"#{cell_id}"
        existing = self.nodes.get(key)
        if existing is not None:
            return existing

        node = Node(id=cell_id, label=label or cell_id)
        self.nodes[key] = node
        return node

    def add_transition(
        self,
        from_ref: str,
        to_ref: str,
        transition_id: str | None = None,
    ) -> Edge | None:
        """Add an edge between two referenced cell spaces.

        Args:
            from_ref: xlink:href of the first endpoint ('#id').
            to_ref: xlink:href of the second endpoint ('#id').
            transition_id: The transition gml:id, if any.

        Returns:
            The new edge, or None if either reference does not resolve.
        """
        from_node = self.resolve(from_ref)
        to_node = self.resolve(to_ref)
        if from_node is None or to_node is None:
            return None

        edge = Edge(from_node=from_node, to_node=to_node, transition_id=transition_id)
        self.edges.append(edge)
        return edge

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def resolve(self, ref: str | None) -> Node | None:
        """Resolve a '#id' cross-reference to a node.

        References to an empty id never resolve.
        """
        if not ref or ref == "#":
            return None
        return self.nodes.get(ref)

    def get_node(self, cell_id: str) -> Node | None:
        """Get a node by its id (without the '#' prefix)."""
        return self.resolve(f"#{cell_id}")

    def get_labels(self) -> list[str]:
        """Get node labels in layout order."""
        return [node.label for node in self.nodes.values()]

    def to_networkx(self) -> nx.MultiDiGraph:
        """Build a networkx view of the graph.

        Nodes are keyed like the mapping and carry 'label' and 'pos'
        attributes. Every edge is kept, including self-loops and repeated
        transitions between the same pair.
        """
        view = nx.MultiDiGraph()
        for key, node in self.nodes.items():
            view.add_node(key, id=node.id, label=node.label, pos=node.position)
        for edge in self.edges:
            view.add_edge(
                edge.from_node.key,
                edge.to_node.key,
                transition_id=edge.transition_id,
            )
        return view

    def isolated_nodes(self) -> list[Node]:
        """Get nodes with no incident edge, in layout order."""
        isolated = set(nx.isolates(self.to_networkx()))
        return [node for key, node in self.nodes.items() if key in isolated]
