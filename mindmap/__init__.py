"""Mind-map core: entries, links, fuzzy title search and project files."""

from mindmap.adapters.stores.in_memory_graph import InMemoryGraphStore
from mindmap.domain.errors import DecodeError, InvalidDocumentError, MalformedDocumentError
from mindmap.domain.models import Entry, TodoItem
from mindmap.services.title_search import TitleSearchIndex
from mindmap.services.workspace import MindMapWorkspace

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "Entry",
    "InMemoryGraphStore",
    "InvalidDocumentError",
    "MalformedDocumentError",
    "MindMapWorkspace",
    "TitleSearchIndex",
    "TodoItem",
]
