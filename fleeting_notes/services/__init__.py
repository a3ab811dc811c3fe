from .editor_session import EditorSession
from .markdown_renderer import MarkdownRenderer

__all__ = ["EditorSession", "MarkdownRenderer"]
