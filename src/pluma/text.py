"""Extract plain text from Pluma AST nodes.

Example:
    >>> from pluma import parse, extract_text
    >>> doc = parse("# Hello **World**")
    >>> extract_text(doc.children[0])
    'Hello World'
"""

from pluma.nodes import (
    Bold,
    BoldItalic,
    Document,
    Header,
    HorizontalRule,
    Image,
    Italic,
    Link,
    Node,
    Paragraph,
    Quote,
    Strikethrough,
    Text,
)


def extract_text(node: Node) -> str:
    """Extract plain text from any AST node.

    Recursively walks the tree, concatenating text content. Spans contribute
    their literal content, links their label and images their alt text.
    Sibling blocks are joined with a space.

    Args:
        node: Any AST node (block or inline).

    Returns:
        Concatenated plain text from the node and its descendants.

    """
    match node:
        case Text() | Italic() | Bold() | BoldItalic() | Strikethrough():
            return node.content
        case Link():
            return node.label
        case Image():
            return node.alt
        case Paragraph() | Header():
            return "".join(extract_text(c) for c in node.children)
        case Quote() | Document():
            return " ".join(extract_text(c) for c in node.children)
        case HorizontalRule():
            return ""
        case _:
            return ""
