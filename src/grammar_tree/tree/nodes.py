"""TreeNode and FrozenTreeNode: multi-property tree nodes.

A node carries an opaque ``data`` payload and a fixed number K of
*property slots*.  Each slot is an independently ordered list of children,
so a single node type can hold semantically distinct child groups (for
example the then-branch and else-branch of an ``if`` statement).

Two variants share the read-only contract defined by ``BaseTreeNode``:

- ``TreeNode``:       mutable during construction; children may only be
                      appended (``add_child``), never removed or replaced.
- ``FrozenTreeNode``: produced by ``freeze()``; a structural snapshot whose
                      slots are tuples.  Appending raises ``FrozenNodeError``.

Equality compares data and the full children structure, slot by slot and
position by position.  Hashing is deliberately shallow: data plus the first
slot only.  Both are computed with explicit work stacks so that arbitrarily
deep trees never exhaust the interpreter's call stack.

Nodes pickle and deep-copy; the per-node append lock is recreated on restore.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from grammar_tree.config import RenderConfig
from grammar_tree.exceptions import (
    FrozenNodeError,
    PropertyIndexError,
    require_not_none,
)
from grammar_tree.render import render

__all__ = ["BaseTreeNode", "FrozenTreeNode", "TreeNode"]

T = TypeVar("T")


def _post_order(
    root: BaseTreeNode[Any],
    children_of: Callable[[BaseTreeNode[Any]], Sequence[BaseTreeNode[Any]]],
) -> Iterator[BaseTreeNode[Any]]:
    """Yield ``root`` and its descendants children-first, without recursion."""
    stack: list[tuple[BaseTreeNode[Any], bool]] = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            yield node
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(children_of(node)))


def _first_slot(node: BaseTreeNode[Any]) -> Sequence[BaseTreeNode[Any]]:
    return node._properties[0] if node._properties else ()


def _all_slots(node: BaseTreeNode[Any]) -> Sequence[BaseTreeNode[Any]]:
    return [child for slot in node._properties for child in slot]


class BaseTreeNode(Generic[T]):
    """Read-only contract shared by mutable and frozen tree nodes.

    All algorithms (size, copy, parent paths, partial matching, rendering)
    accept any ``BaseTreeNode`` and never depend on which variant they get.
    """

    __slots__ = ("_data", "_properties")

    _data: T
    _properties: Sequence[Sequence[BaseTreeNode[T]]]

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def data(self) -> T:
        """The payload this node was created with."""
        return self._data

    @property
    def property_count(self) -> int:
        """Number of property slots (K), fixed at construction."""
        return len(self._properties)

    @property
    def children_by_property(self) -> tuple[tuple[BaseTreeNode[T], ...], ...]:
        """Read-only snapshot of every slot's children, in slot order."""
        return tuple(tuple(slot) for slot in self._properties)

    def get_children(self, property_index: int) -> tuple[BaseTreeNode[T], ...]:
        """Return the children held in one property slot."""
        return tuple(self._slot(property_index))

    def get_child(self, index: int, property_index: int) -> BaseTreeNode[T]:
        """Return the ``index``-th child of slot ``property_index``.

        Raises:
            PropertyIndexError: If the slot or the position does not exist.
        """
        slot = self._slot(property_index)
        if not 0 <= index < len(slot):
            msg = (
                f"child index {index} out of range for property {property_index} "
                f"with {len(slot)} children"
            )
            raise PropertyIndexError(msg)
        return slot[index]

    def is_leaf(self) -> bool:
        """True when every property slot is empty."""
        return not any(self._properties)

    def _slot(self, property_index: int) -> Sequence[BaseTreeNode[T]]:
        if not 0 <= property_index < len(self._properties):
            msg = (
                f"property index {property_index} out of range for node "
                f"with {len(self._properties)} properties"
            )
            raise PropertyIndexError(msg)
        return self._properties[property_index]

    # ------------------------------------------------------------------
    # Freezing
    # ------------------------------------------------------------------

    def freeze(self) -> FrozenTreeNode[T]:
        """Return an immutable snapshot of the subtree rooted here.

        The snapshot shares data values with this tree but no nodes.
        """
        frozen: dict[int, FrozenTreeNode[T]] = {}
        for node in _post_order(self, _all_slots):
            frozen[id(node)] = FrozenTreeNode(
                node._data,
                tuple(
                    tuple(frozen[id(child)] for child in slot)
                    for slot in node._properties
                ),
            )
        return frozen[id(self)]

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def __getstate__(self) -> tuple[T, Sequence[Sequence[BaseTreeNode[T]]]]:
        return self._data, self._properties

    def __setstate__(
        self, state: tuple[T, Sequence[Sequence[BaseTreeNode[T]]]]
    ) -> None:
        self._data, self._properties = state

    # ------------------------------------------------------------------
    # Equality and hashing
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BaseTreeNode):
            return NotImplemented

        pending: list[tuple[BaseTreeNode[Any], BaseTreeNode[Any]]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left._data != right._data:
                return False
            if len(left._properties) != len(right._properties):
                return False
            for left_slot, right_slot in zip(
                left._properties, right._properties, strict=True
            ):
                if len(left_slot) != len(right_slot):
                    return False
                pending.extend(zip(left_slot, right_slot, strict=True))
        return True

    def __hash__(self) -> int:
        # Only the first slot contributes, recursively; later slots are ignored.
        hashes: dict[int, int] = {}
        for node in _post_order(self, _first_slot):
            if node._properties:
                first = tuple(hashes[id(child)] for child in node._properties[0])
                hashes[id(node)] = hash((node._data, first))
            else:
                hashes[id(node)] = hash((node._data,))
        return hashes[id(self)]

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def to_string(
        self,
        converter: Callable[[T], str] = str,
        config: RenderConfig | None = None,
    ) -> str:
        """Render the subtree using ``converter`` to turn data into text."""
        return render(self, converter, config)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(data={self._data!r}, "
            f"property_count={len(self._properties)})"
        )


class TreeNode(BaseTreeNode[T]):
    """A mutable tree node whose slots grow by appending children.

    ``add_child`` is serialised per node with a lock so that concurrent
    appends never corrupt a slot.  Reading a node while another thread
    appends to it is not supported.

    Example::

        root = TreeNode.create("if", 2)
        root.add_child(TreeNode.create("then", 0), 0)
        root.add_child(TreeNode.create("else", 0), 1)
        print(root)
        # if
        # -(0)then
        # -(1)else
    """

    __slots__ = ("_lock",)

    _properties: tuple[list[BaseTreeNode[T]], ...]

    def __init__(self, data: T, property_count: int) -> None:
        """Create a node with ``property_count`` empty slots.

        Raises:
            ValueError: If ``property_count`` is negative.
        """
        if property_count < 0:
            msg = f"property_count must be >= 0, got {property_count}"
            raise ValueError(msg)
        self._data = data
        self._properties = tuple([] for _ in range(property_count))
        self._lock = threading.Lock()

    @classmethod
    def create(cls, data: T, property_count: int) -> TreeNode[T]:
        """Create a childless node holding ``data`` with K property slots."""
        return cls(data, property_count)

    @classmethod
    def create_like(cls, other: BaseTreeNode[T]) -> TreeNode[T]:
        """Create a childless node with ``other``'s data and property count."""
        require_not_none(other, "other")
        return cls(other.data, other.property_count)

    def add_child(self, child: BaseTreeNode[T], property_index: int) -> None:
        """Append ``child`` to the end of slot ``property_index``.

        Raises:
            NullArgumentError: If ``child`` is None.
            PropertyIndexError: If ``property_index`` is not in ``[0, K)``.
        """
        require_not_none(child, "child")
        with self._lock:
            slot = self._slot(property_index)
            slot.append(child)  # type: ignore[attr-defined]

    def __setstate__(
        self, state: tuple[T, Sequence[Sequence[BaseTreeNode[T]]]]
    ) -> None:
        # Locks do not survive pickling; each restored node gets a fresh one.
        super().__setstate__(state)
        self._lock = threading.Lock()


class FrozenTreeNode(BaseTreeNode[T]):
    """An immutable tree node.  Build one with ``BaseTreeNode.freeze()``."""

    __slots__ = ()

    _properties: tuple[tuple[FrozenTreeNode[T], ...], ...]

    def __init__(
        self, data: T, properties: tuple[tuple[FrozenTreeNode[T], ...], ...]
    ) -> None:
        self._data = data
        self._properties = properties

    def add_child(self, child: BaseTreeNode[T], property_index: int) -> None:
        """Always fails: frozen nodes cannot grow.

        Raises:
            FrozenNodeError: On every call.
        """
        msg = "cannot add a child to a frozen node"
        raise FrozenNodeError(msg)

    def freeze(self) -> FrozenTreeNode[T]:
        """A frozen subtree is already its own snapshot."""
        return self
