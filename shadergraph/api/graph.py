from collections import deque
from .core import Node
from .sockets import Link


def _node_id(node) -> str:
    return node.id if isinstance(node, Node) else node


class Graph:
    """
    A set of nodes and the links between their ports.

    The graph observes its nodes' controls: a control change only queues a
    dirty notification here. Recompiling is left to whoever drains the queue.
    """
    def __init__(self):
        self.nodes = {}
        self.links = []
        self.dirty = True
        self._pending = deque()

    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise ValueError(f"Graph already contains a node with id '{node.id}'")
        self.nodes[node.id] = node
        node.observer = self
        self.notify_changed(node.id)
        return node

    def get_node(self, node_id: str) -> Node:
        return self.nodes[node_id]

    def remove_node(self, node) -> Node:
        """Removes a node together with every link touching its ports."""
        node_id = _node_id(node)
        removed = self.nodes.pop(node_id)
        removed.observer = None
        self.links = [l for l in self.links if not l.touches(node_id)]
        self._pending = deque(p for p in self._pending if p != node_id)
        self.dirty = True
        return removed

    def connect(self, source, source_output: str, target, target_input: str) -> Link:
        """
        Links an output port to an input port.

        An input accepts a single link, so any link already attached to
        `target_input` is replaced.

        Raises:
            KeyError: If either node is not part of the graph.
            ValueError: If a port name does not exist on its node.
        """
        src, dst = self.nodes[_node_id(source)], self.nodes[_node_id(target)]
        if source_output not in src.outputs:
            raise ValueError(f"Node '{src.id}' has no output named '{source_output}'")
        if target_input not in dst.inputs:
            raise ValueError(f"Node '{dst.id}' has no input named '{target_input}'")

        self.links = [l for l in self.links if not (l.target == dst.id and l.target_input == target_input)]
        link = Link(src.id, source_output, dst.id, target_input)
        self.links.append(link)
        self.notify_changed(dst.id)
        return link

    def disconnect(self, target, target_input: str):
        target_id = _node_id(target)
        before = len(self.links)
        self.links = [l for l in self.links if not (l.target == target_id and l.target_input == target_input)]
        if len(self.links) != before:
            self.notify_changed(target_id)

    def incoming(self, node) -> dict:
        """Maps the connected input port names of a node to their links."""
        node_id = _node_id(node)
        return {l.target_input: l for l in self.links if l.target == node_id}

    def outgoing(self, node) -> list:
        node_id = _node_id(node)
        return [l for l in self.links if l.source == node_id]

    def terminals(self) -> list:
        """Nodes whose outputs feed nothing, in insertion order."""
        sources = {l.source for l in self.links}
        return [n for n in self.nodes.values() if n.id not in sources]

    def notify_changed(self, node_id: str):
        if node_id not in self._pending:
            self._pending.append(node_id)
        self.dirty = True

    def drain_dirty(self) -> list:
        """Pops every pending dirty notification and clears the dirty flag."""
        drained = list(self._pending)
        self._pending.clear()
        self.dirty = False
        return drained

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes.values())

    def __contains__(self, node):
        return _node_id(node) in self.nodes
