# dancing_links.py

from typing import Any, Hashable, Iterator, List, Optional, Sequence, Tuple

Snapshot = Tuple[Tuple[int, ...], ...]


class DancingLinks:
    """
    Sparse 0/1 matrix for exact cover, stored as Knuth's four-way
    circular lists.

    Nodes live in parallel lists and are addressed by index. Node 0 is
    the root of the column header ring, column headers follow in the
    order they were added, and row nodes come after them. Covering a
    column only rewires neighbour indices, so uncovering it in reverse
    order restores the structure exactly.
    """

    ROOT = 0

    def __init__(self) -> None:
        self.left: List[int] = [self.ROOT]
        self.right: List[int] = [self.ROOT]
        self.up: List[int] = [self.ROOT]
        self.down: List[int] = [self.ROOT]
        self.column: List[int] = [self.ROOT]
        # live row count, only meaningful for header nodes
        self.size: List[int] = [0]
        # row index for row nodes, -1 for headers
        self.row_of: List[int] = [-1]

        self._column_names: dict[int, Hashable] = {}
        self._row_labels: List[Any] = []
        self._row_heads: List[int] = []

    # --------------------------
    # Construction
    # --------------------------

    def _new_node(self, column: int, row: int) -> int:
        node = len(self.left)
        self.left.append(node)
        self.right.append(node)
        self.up.append(node)
        self.down.append(node)
        self.column.append(column)
        self.size.append(0)
        self.row_of.append(row)
        return node

    def add_column(self, name: Hashable) -> int:
        """Append a column header at the end of the header ring."""
        c = self._new_node(column=-1, row=-1)
        self.column[c] = c
        last = self.left[self.ROOT]
        self.left[c] = last
        self.right[c] = self.ROOT
        self.right[last] = c
        self.left[self.ROOT] = c
        self._column_names[c] = name
        return c

    def add_row(self, label: Any, columns: Sequence[int]) -> int:
        """
        Append a row with a 1 in each of the given columns.

        Each node goes to the bottom of its column, so rows keep the order
        in which they were added. Returns the row index.
        """
        if not columns:
            raise ValueError(f"Row {label!r} must cover at least one column")
        if len(set(columns)) != len(columns):
            raise ValueError(f"Row {label!r} repeats a column")
        for c in columns:
            if c not in self._column_names:
                raise ValueError(f"Row {label!r} refers to unknown column {c}")

        row = len(self._row_labels)
        first = None
        for c in columns:
            node = self._new_node(column=c, row=row)

            # vertical: insert above the header
            bottom = self.up[c]
            self.up[node] = bottom
            self.down[node] = c
            self.down[bottom] = node
            self.up[c] = node
            self.size[c] += 1

            # horizontal: insert before the first node of the row
            if first is None:
                first = node
            else:
                last = self.left[first]
                self.left[node] = last
                self.right[node] = first
                self.right[last] = node
                self.left[first] = node

        self._row_labels.append(label)
        self._row_heads.append(first)
        return row

    # --------------------------
    # Cover / uncover
    # --------------------------

    def cover(self, c: int) -> None:
        """Remove column c and every row that has a 1 in it."""
        left, right, up, down = self.left, self.right, self.up, self.down
        right[left[c]] = right[c]
        left[right[c]] = left[c]

        i = down[c]
        while i != c:
            j = right[i]
            while j != i:
                down[up[j]] = down[j]
                up[down[j]] = up[j]
                self.size[self.column[j]] -= 1
                j = right[j]
            i = down[i]

    def uncover(self, c: int) -> None:
        """Undo cover(c). Must be called in reverse order of the covers."""
        left, right, up, down = self.left, self.right, self.up, self.down
        i = up[c]
        while i != c:
            j = left[i]
            while j != i:
                self.size[self.column[j]] += 1
                down[up[j]] = j
                up[down[j]] = j
                j = left[j]
            i = up[i]

        right[left[c]] = c
        left[right[c]] = c

    def choose_column(self) -> Optional[int]:
        """
        Linked column with the fewest live rows (MRV heuristic).
        Ties go to the column that comes first in the header ring.
        """
        best = None
        best_size = -1
        c = self.right[self.ROOT]
        while c != self.ROOT:
            s = self.size[c]
            if best is None or s < best_size:
                best, best_size = c, s
                if s == 0:
                    break
            c = self.right[c]
        return best

    # --------------------------
    # Inspection
    # --------------------------

    def is_empty(self) -> bool:
        return self.right[self.ROOT] == self.ROOT

    def columns(self) -> Iterator[int]:
        """Currently linked column headers, in ring order."""
        c = self.right[self.ROOT]
        while c != self.ROOT:
            yield c
            c = self.right[c]

    def rows_of(self, c: int) -> Iterator[int]:
        """Currently linked nodes of column c, top to bottom."""
        i = self.down[c]
        while i != c:
            yield i
            i = self.down[i]

    def row_nodes(self, node: int) -> Iterator[int]:
        """All nodes of the row containing node, starting with node."""
        yield node
        j = self.right[node]
        while j != node:
            yield j
            j = self.right[j]

    def row_columns(self, row: int) -> List[int]:
        return [self.column[j] for j in self.row_nodes(self._row_heads[row])]

    def label_of(self, node: int) -> Any:
        return self._row_labels[self.row_of[node]]

    def row_label(self, row: int) -> Any:
        return self._row_labels[row]

    def column_size(self, c: int) -> int:
        return self.size[c]

    def column_name(self, c: int) -> Hashable:
        return self._column_names[c]

    @property
    def column_count(self) -> int:
        return len(self._column_names)

    @property
    def row_count(self) -> int:
        return len(self._row_labels)

    def snapshot(self) -> Snapshot:
        """Copy of every link list; equal snapshots mean identical structure."""
        return (
            tuple(self.left),
            tuple(self.right),
            tuple(self.up),
            tuple(self.down),
            tuple(self.column),
            tuple(self.size),
        )

    def __repr__(self) -> str:
        return (
            f"DancingLinks(columns={self.column_count}, rows={self.row_count}, "
            f"linked={sum(1 for _ in self.columns())})"
        )
