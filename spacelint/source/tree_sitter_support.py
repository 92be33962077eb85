"""
Tree-sitter infrastructure for source documents.
Provides grammar loading, tree walking and conversion of tree-sitter
byte points into character-based tokens.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Iterator, List, Optional, Set

from tree_sitter import Language, Node, Parser, Tree

from ..tokens import Position, Token


class TreeSitterDocument(ABC):
    """
    Wrapper for a Tree-sitter parsed document.
    """

    extensions: ClassVar[Set[str]] = set()

    def __init__(self, text: str, ext: str):
        self.text = text
        self.ext = ext
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode("utf-8")
        self._line_bytes: List[bytes] = self._text_bytes.split(b"\n")
        self._line_starts: List[int] = self._compute_line_starts(text)
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for the document's grammar.

        Returns:
            Language instance
        """
        pass

    def get_parser(self) -> Parser:
        """
        Get parser for the language.

        Returns:
            Parser instance
        """
        return Parser(self.get_language())

    def _parse(self):
        """Parse the document with Tree-sitter."""
        parser = self.get_parser()
        self.tree = parser.parse(self._text_bytes)

    @staticmethod
    def _compute_line_starts(text: str) -> List[int]:
        starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                starts.append(i + 1)
        return starts

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def walk_tree(self, start_node: Optional[Node] = None) -> Iterator[Node]:
        """
        Walk the tree using TreeCursor for efficient traversal.

        Args:
            start_node: Node to start from (default: root)

        Yields:
            Node objects in depth-first order
        """
        if start_node is None:
            start_node = self.root_node

        cursor = start_node.walk()
        visited_children = False

        while True:
            if not visited_children:
                yield cursor.node

                if not cursor.goto_first_child():
                    visited_children = True
            elif cursor.goto_next_sibling():
                visited_children = False
            elif not cursor.goto_parent():
                break
            else:
                visited_children = True

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    def char_column(self, row: int, byte_column: int) -> int:
        """
        Convert a tree-sitter (row, byte column) point into a character column.
        A byte column inside a multi-byte character maps to the column before it.
        """
        if row >= len(self._line_bytes):
            return 0
        return len(self._line_bytes[row][:byte_column].decode("utf-8", errors="ignore"))

    def point_to_position(self, row: int, byte_column: int) -> Position:
        """0-based tree-sitter point -> 1-based line, character column."""
        return Position(row + 1, self.char_column(row, byte_column))

    def point_to_offset(self, row: int, byte_column: int) -> int:
        """0-based tree-sitter point -> character offset in the text."""
        if row >= len(self._line_starts):
            return len(self.text)
        return self._line_starts[row] + self.char_column(row, byte_column)

    def node_start(self, node: Node) -> Position:
        row, col = node.start_point
        return self.point_to_position(row, col)

    def make_token(self, node: Node) -> Token:
        """Build a character-based Token from a (leaf) node."""
        srow, scol = node.start_point
        erow, ecol = node.end_point
        start = self.point_to_position(srow, scol)
        end = self.point_to_position(erow, ecol)
        return Token(
            text=self.get_node_text(node),
            start=self.point_to_offset(srow, scol),
            end=self.point_to_offset(erow, ecol),
            start_line=start.line,
            start_column=start.column,
            end_line=end.line,
            end_column=end.column,
        )

    @staticmethod
    def first_leaf(node: Node) -> Node:
        """Leftmost token node below `node` (comments excluded)."""
        current = node
        while current.child_count:
            children = [c for c in current.children if c.type != "comment"]
            if not children:
                break
            current = children[0]
        return current

    @staticmethod
    def last_leaf(node: Node) -> Node:
        """Rightmost token node below `node` (comments excluded)."""
        current = node
        while current.child_count:
            children = [c for c in current.children if c.type != "comment"]
            if not children:
                break
            current = children[-1]
        return current

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error
