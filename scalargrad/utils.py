"""
Visualization utilities for scalargrad computational graphs.

This module provides functions to visualize the computational graph created by
Value objects, showing the flow of data and gradients through operations.
"""

from graphviz import Digraph

from scalargrad.engine import Op


def trace(root):
    """
    Trace the computational graph starting from a root Value node.

    Args:
        root: A Value object representing the output of a computation

    Returns:
        tuple: (nodes, edges) where:
            - nodes: set of all Value objects in the graph
            - edges: set of (operand, result) tuples representing connections

    Example:
        >>> from scalargrad.engine import Value
        >>> x = Value(2.0)
        >>> y = Value(3.0)
        >>> z = x * y + x
        >>> nodes, edges = trace(z)
        >>> len(nodes)  # x, y, x*y and z
        4
    """
    nodes, edges = set(), set()
    stack = [root]

    while stack:
        v = stack.pop()
        if v in nodes:
            continue
        nodes.add(v)
        for child in v._prev:
            edges.add((child, v))
            stack.append(child)

    return nodes, edges


def draw_dot(root, format='svg', rankdir='LR'):
    """
    Visualize the computational graph of a Value object as a directed graph.

    Creates a Graphviz diagram showing:
    - Value nodes with their name, data and gradient
    - Operation nodes (+, *, **, ReLU)
    - Edges showing data flow through the computation

    Args:
        root: A Value object (typically the loss) to visualize from
        format: Output format ('svg', 'png', 'pdf', etc.)
        rankdir: Graph direction - 'LR' (left-right) or 'TB' (top-bottom)

    Returns:
        Digraph: A graphviz Digraph object that can be rendered or displayed

    Note:
        Rendering to a file needs the Graphviz system binaries; building
        the Digraph and reading its .source does not.
    """
    assert rankdir in ['LR', 'TB'], "rankdir must be 'LR' (left-right) or 'TB' (top-bottom)"

    nodes, edges = trace(root)
    dot = Digraph(format=format, graph_attr={'rankdir': rankdir})

    for n in nodes:
        label = f'{{ {n.name} | data {n.data:.4f} | grad {n.grad:.4f} }}'
        dot.node(name=str(id(n)), label=label, shape='record')

        if n._op is not Op.NONE:
            dot.node(name=str(id(n)) + n._op.value, label=n._op.value)
            dot.edge(str(id(n)) + n._op.value, str(id(n)))

    for n1, n2 in edges:
        dot.edge(str(id(n1)), str(id(n2)) + n2._op.value)

    return dot
