# -*- coding: utf-8 -*-
"""
entropytree.export
==================

Text, rule, plain-data and Graphviz renderings of a built tree.

Every function accepts the root as returned by the builder: a
:class:`~entropytree.node.TreeNode`, a :class:`~entropytree.node.Leaf`, or
``None`` when splitting stopped at the root.
"""

from __future__ import annotations

from .node import Leaf, TreeNode

NONE_MARKER = "<none>"


def _feature_name(feature: int, fn=None) -> str:
    if fn is not None and 0 <= feature < len(fn):
        return str(fn[feature])
    return f"X[{feature}]"


def _describe_leaf(leaf: Leaf) -> str:
    return f"Leaf(label={leaf.majority_label}, n={leaf.n_samples}, reason={leaf.reason})"


def _describe_node(node: TreeNode, fn=None) -> str:
    s = node.split
    return (f"{_feature_name(s.feature, fn)} < {s.threshold:.4f} "
            f"(gain={s.gain:.4f}, n={node.n_samples})")


# -----------------------------------------------------------------------------
# Text
# -----------------------------------------------------------------------------
def _render_lines(node, prefix: str, indent: str, fn, lines: list):
    if node is None:
        lines.append(f"{indent}{prefix}{NONE_MARKER}")
    elif isinstance(node, Leaf):
        lines.append(f"{indent}{prefix}{_describe_leaf(node)}")
    else:
        lines.append(f"{indent}{prefix}{_describe_node(node, fn)}")
        _render_lines(node.left, "L: ", indent + "  ", fn, lines)
        _render_lines(node.right, "R: ", indent + "  ", fn, lines)


def render_tree(node, feature_names=None) -> str:
    """
    Render a tree as indented text, one line per node.

    Children are prefixed ``L:`` (``feature < threshold``) and ``R:``
    (``feature >= threshold``) and indented two spaces per level.  Absent
    nodes are shown as ``<none>``.

    Parameters
    ----------
    node : TreeNode, Leaf or None
        Root of the tree.
    feature_names : list[str], optional
        Column names; ``X[i]`` is used when omitted.

    Returns
    -------
    str
    """
    lines: list[str] = []
    _render_lines(node, "", "", feature_names, lines)
    return "\n".join(lines)


# -----------------------------------------------------------------------------
# Rules
# -----------------------------------------------------------------------------
def _collect_rules(node, parts, rules, fn):
    if not isinstance(node, TreeNode):
        body = " AND ".join(parts) if parts else "<root>"
        outcome = NONE_MARKER if node is None else f"label={node.majority_label} (n={node.n_samples})"
        rules.append(f"{body} => {outcome}")
        return
    name = _feature_name(node.split.feature, fn)
    thr = node.split.threshold
    _collect_rules(node.left, parts + [f"{name} < {thr:.4f}"], rules, fn)
    _collect_rules(node.right, parts + [f"{name} >= {thr:.4f}"], rules, fn)


def tree_to_rules(node, feature_names=None) -> list[str]:
    """Return one ``<antecedent> => <outcome>`` string per stopping point."""
    rules: list[str] = []
    _collect_rules(node, [], rules, feature_names)
    return rules


# -----------------------------------------------------------------------------
# Plain data
# -----------------------------------------------------------------------------
def tree_to_dict(node):
    """Convert a tree to nested ``dict`` objects; absent nodes become ``None``."""
    if node is None:
        return None
    if isinstance(node, Leaf):
        return {
            "leaf": True,
            "n_samples": node.n_samples,
            "majority_label": node.majority_label,
            "distribution": dict(node.distribution),
            "reason": node.reason,
        }
    return {
        "feature": node.split.feature,
        "threshold": node.split.threshold,
        "gain": node.split.gain,
        "depth": node.depth,
        "n_samples": node.n_samples,
        "left": tree_to_dict(node.left),
        "right": tree_to_dict(node.right),
    }


# -----------------------------------------------------------------------------
# Graphviz
# -----------------------------------------------------------------------------
def _add_graph_nodes(dot, node, name: str, fn):
    if node is None:
        dot.node(name, NONE_MARKER, shape="plaintext")
        return
    if isinstance(node, Leaf):
        dot.node(name, f"label={node.majority_label}\nn={node.n_samples}\n{node.reason}",
                 shape="box", style="filled", color="lightgrey")
        return
    s = node.split
    label = f"{_feature_name(s.feature, fn)} < {s.threshold:.4f}\ngain={s.gain:.4f}"
    dot.node(name, label, shape="ellipse", style="filled", color="lightblue")
    l_id, r_id = name + "L", name + "R"
    _add_graph_nodes(dot, node.left, l_id, fn)
    _add_graph_nodes(dot, node.right, r_id, fn)
    dot.edge(name, l_id, label="True")
    dot.edge(name, r_id, label="False")


def export_graphviz(node, filename: str | None = None, *, feature_names=None,
                    format: str = "png") -> str:
    """
    Export the tree structure in Graphviz format.

    When requesting a DOT file (``format='dot'``) no external Graphviz binary
    is required; the DOT source is written directly to disk.  For other
    formats this function attempts to invoke the system ``dot`` command and
    falls back to writing a ``.dot`` file if rendering fails.

    Parameters
    ----------
    node : TreeNode, Leaf or None
        Root of the tree.
    filename : str or None, default=None
        Basename of the output file.  If None, the DOT source is returned and
        no file is written.
    feature_names : list[str], optional
        Column names; ``X[i]`` is used when omitted.
    format : str, default="png"
        Graphviz output format, e.g. ``'png'``, ``'pdf'``, ``'svg'`` or
        ``'dot'``.

    Returns
    -------
    str
        Path to the written file, or the DOT source if ``filename`` is None.

    Raises
    ------
    RuntimeError
        If the ``graphviz`` package is not installed.
    """
    try:
        import graphviz
    except ImportError:
        raise RuntimeError("Graphviz is required for export_graphviz but not installed.")
    dot = graphviz.Digraph(format=format)
    _add_graph_nodes(dot, node, "0", feature_names)

    if filename is None:
        return dot.source

    if format.lower() == "dot":
        path = f"{filename}.dot"
        dot.save(path)
        return path
    try:
        dot.render(filename, cleanup=True)
        return f"{filename}.{format}"
    except (graphviz.ExecutableNotFound, graphviz.CalledProcessError):
        fallback_path = f"{filename}.dot"
        dot.save(fallback_path)
        return fallback_path
