from __future__ import annotations

from typing import Dict, List, Optional, Type

from .javascript import JavaScriptDocument
from .regions import iter_regions
from .tree_sitter_support import TreeSitterDocument
from .typescript import TypeScriptDocument

_DOCUMENT_BY_EXT: Dict[str, Type[TreeSitterDocument]] = {}

for _cls in (JavaScriptDocument, TypeScriptDocument):
    for _ext in _cls.extensions:
        _DOCUMENT_BY_EXT[_ext] = _cls


def document_class_for_ext(ext: str) -> Optional[Type[TreeSitterDocument]]:
    """Document class for a file extension (".js", ".ts", ...), None if unsupported."""
    return _DOCUMENT_BY_EXT.get(ext.lower())


def supported_extensions() -> List[str]:
    return sorted(_DOCUMENT_BY_EXT)


def parse_document(text: str, ext: str) -> TreeSitterDocument:
    """
    Parse source text with the grammar matching the extension.

    Raises:
        ValueError: If the extension is not supported
    """
    cls = document_class_for_ext(ext)
    if cls is None:
        raise ValueError(f"Unsupported file extension: {ext}")
    return cls(text, ext.lower())


__all__ = [
    "TreeSitterDocument",
    "JavaScriptDocument",
    "TypeScriptDocument",
    "iter_regions",
    "document_class_for_ext",
    "supported_extensions",
    "parse_document",
]
