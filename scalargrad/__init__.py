"""
Scalargrad: a reverse-mode autograd engine over scalar values.

This package provides automatic differentiation on scalars and the
neuron, layer and MLP building blocks on top of it.
"""

from scalargrad.engine import Op, Value, topological_order
from scalargrad import nn
from scalargrad.utils import draw_dot, trace

__version__ = "0.1.0"
__all__ = ["Op", "Value", "topological_order", "nn", "draw_dot", "trace"]
