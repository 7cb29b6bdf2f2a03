"""Doubly linked list with externally owned nodes."""


class DNode:
    """A list node carrying a value."""

    def __init__(self, value):
        self.value = value
        self.next = None
        self.prev = None

    def __repr__(self):
        return f"DNode({self.value!r})"


class DList:
    """A doubly linked list of DNode objects."""

    def __init__(self):
        self.head = None

    def insert_head(self, node):
        """Put a node at the front of the list."""
        node.next = self.head
        if self.head is not None:
            self.head.prev = node
        self.head = node
        node.prev = None

    def insert_after(self, anchor, node):
        """Link a node directly after anchor."""
        node.next = anchor.next
        if node.next is not None:
            node.next.prev = node
        node.prev = anchor
        anchor.next = node

    def find(self, value):
        """Return the first node holding value, or None."""
        return next((node for node in self if node.value == value), None)

    def remove(self, node):
        """Unlink a node from the list; does nothing on an empty list."""
        if node is None or self.head is None:
            return
        if self.head is node:
            self.head = node.next
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.next = node.prev = None

    def detach(self, node):
        """Unlink a node that must be in the list and return it."""
        if not any(current is node for current in self):
            raise ValueError(f"{node!r} is not in the list")
        self.remove(node)
        return node

    def clear(self):
        """Drop every node."""
        node = self.head
        while node is not None:
            following = node.next
            node.next = node.prev = None
            node = following
        self.head = None

    def __iter__(self):
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __len__(self):
        return sum(1 for _ in self)