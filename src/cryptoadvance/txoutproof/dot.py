""" Renders a PartialMerkleTree in the Graphviz DOT language """
import logging

import graphviz

from .config import BaseConfig

logger = logging.getLogger(__name__)


def node_label(node, hash_chars=8):
    """The root gets the full hash, all the others a truncated one"""
    if node.hex is None:
        return "?"
    if node.is_root:
        return node.hex
    return f"{node.hex[:hash_chars]}..."


def node_attrs(node, config=BaseConfig):
    if node.is_leaf:
        shape = "box"
        if node.matched:
            fillcolor = config.MATCHED_LEAF_FILLCOLOR
        else:
            fillcolor = config.LEAF_FILLCOLOR
    else:
        shape = "ellipse"
        fillcolor = config.INTERNAL_FILLCOLOR
    return {
        "label": node_label(node, config.label_hash_chars()),
        "shape": shape,
        "style": "filled",
        "fillcolor": fillcolor,
    }


def edges(tree):
    """Yields (parent_id, child_id, tailport) for every edge of the tree,
    the tailport forces left children to the left and right ones to the right"""
    for node in tree.nodes:
        if node.left is not None:
            yield node.node_id, node.left.node_id, "sw"
        if node.right is not None:
            yield node.node_id, node.right.node_id, "se"


def build_graph(tree, config=BaseConfig):
    graph = graphviz.Digraph(name=config.GRAPH_NAME)
    for node in tree.nodes:
        graph.node(node.node_id, **node_attrs(node, config))
    for parent_id, child_id, tailport in edges(tree):
        graph.edge(parent_id, child_id, tailport=tailport)
    return graph


def render_dot(tree, config=BaseConfig):
    source = build_graph(tree, config).source
    logger.debug(f"Rendered {len(tree.nodes)} nodes to DOT")
    return source
