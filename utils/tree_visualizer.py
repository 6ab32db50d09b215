# utils/tree_visualizer.py
# This file is part of Boolexps - Boolean Expression Transformations
#
# Graphviz rendering of expression trees

import os
from itertools import count
from typing import Optional

from graphviz import Digraph, ExecutableNotFound

from boolexps import ast_nodes as ast
from utils.logger import get_logger

logger = get_logger()

VISUALIZATION_OUTPUT_FOLDER = "expression_visualizations"

_NODE_STYLES = {
    ast.Const: {"shape": "box", "style": "filled", "fillcolor": "lightgrey"},
    ast.Variable: {"shape": "ellipse", "style": "filled", "fillcolor": "lightskyblue"},
    ast.Not: {"shape": "circle", "style": "filled", "fillcolor": "lightpink"},
    ast.And: {"shape": "circle", "style": "filled", "fillcolor": "palegreen"},
    ast.Or: {"shape": "circle", "style": "filled", "fillcolor": "lightgoldenrodyellow"},
}


def _node_label(expr: ast.Expr) -> str:
    if isinstance(expr, ast.Not):
        return "NOT"
    if isinstance(expr, ast.And):
        return "AND"
    if isinstance(expr, ast.Or):
        return "OR"
    return str(expr)


def build_expression_graph(expr: ast.Expr, title: Optional[str] = None, fmt: str = "png") -> Digraph:
    """
    Builds a Graphviz digraph with one node per tree node.
    Equal subtrees get separate graph nodes, so the drawing mirrors the tree
    rather than a shared DAG. Operands are drawn left to right.

    Args:
        expr: The expression to draw.
        title: Optional graph label, e.g. the transformation name.
        fmt: The output format used when the graph is rendered.
    """
    dot = Digraph(comment=title or str(expr), format=fmt)
    dot.attr(rankdir="TB", ordering="out")
    if title:
        dot.attr(label=title, labelloc="t")

    ids = count()

    def add(node: ast.Expr) -> str:
        node_id = f"n{next(ids)}"
        dot.node(node_id, _node_label(node), **_NODE_STYLES[type(node)])
        if isinstance(node, ast.Not):
            dot.edge(node_id, add(node.operand))
        elif isinstance(node, (ast.And, ast.Or)):
            dot.edge(node_id, add(node.left))
            dot.edge(node_id, add(node.right))
        return node_id

    add(expr)
    return dot


def render_expression_tree(expr: ast.Expr, base_filename: str, fmt: str = "png",
                           title: Optional[str] = None) -> Optional[str]:
    """
    Renders an expression tree to an image file in 'expression_visualizations'.

    Args:
        expr: The expression to draw.
        base_filename: The base name for the output file.
        fmt: The output format for the image (e.g., "png", "svg").
        title: Optional graph label.

    Returns:
        The path of the rendered file, or None if rendering failed.
    """
    dot = build_expression_graph(expr, title=title, fmt=fmt)

    try:
        os.makedirs(VISUALIZATION_OUTPUT_FOLDER, exist_ok=True)
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
    except OSError as e:
        logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}. "
                     f"Saving to current directory instead.")
        output_path = base_filename

    try:
        rendered = dot.render(output_path, view=False, cleanup=True)
    except ExecutableNotFound as e:
        logger.warning(f"Failed to render expression tree to {output_path}.{fmt}: {e}. "
                       "Ensure Graphviz executables (dot) are in your system's PATH.")
        return None

    logger.info(f"Expression tree visualization saved to {rendered}")
    return rendered
