"""Pluma renderers.

Renderers convert typed AST nodes into output text.

Available Renderers:
- MarkupRenderer: Renders AST back to minimal markup

"""

from pluma.renderers.markup import MarkupRenderer
from pluma.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "MarkupRenderer"]
