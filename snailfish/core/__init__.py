from .tree import Arena, Node, NodeRef, Tree, render  # noqa: F401
from .parser import parse, parse_lines  # noqa: F401
