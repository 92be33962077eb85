"""
JavaScript documents (tree-sitter-javascript grammar).
"""

from __future__ import annotations

from tree_sitter import Language

from .tree_sitter_support import TreeSitterDocument


class JavaScriptDocument(TreeSitterDocument):

    extensions = {".js", ".jsx", ".mjs", ".cjs"}

    def get_language(self) -> Language:
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())
