import logging
import numbers
from enum import Enum

import numpy as np

logger = logging.getLogger(__name__)


class Op(str, Enum):
    """Tag for the operation that produced a Value."""

    NONE = ''
    ADD = '+'
    MUL = '*'
    POW = '**'
    RELU = 'ReLU'


class Value:
    """
    Wraps a single float and tracks operations for automatic differentiation.

    Every arithmetic operation on Values returns a new Value that remembers
    its operands and the operation that produced it. Calling backward() on
    a result fills in the grad of every Value it was computed from.

    Example:
        >>> x = Value(2.0)
        >>> y = Value(3.0)
        >>> z = x * y + x
        >>> z.backward()
        >>> print(x.grad)  # dz/dx = y + 1 = 4.0
    """

    def __init__(self, data, _children=(), _op=Op.NONE, name=""):
        """
        Initialize a Value object.

        Args:
            data: A real scalar (int, float or numpy scalar)
            _children: Tuple of operand Values (internal use for autograd)
            _op: Op that created this Value (internal)
            name: Optional name for debugging and visualization
        """
        self._data = np.float64(float(data))
        self.grad = np.float64(0.0)
        self.name = name

        # Operands in order; a + a keeps both references
        self._prev = tuple(_children)
        self._op = Op(_op)
        self._exponent = None

    @property
    def data(self):
        """The forward value. Fixed once the Value is built."""
        return self._data

    def __add__(self, other):
        other = other if isinstance(other, Value) else Value(other)
        return Value(self.data + other.data, (self, other), Op.ADD)

    def __mul__(self, other):
        other = other if isinstance(other, Value) else Value(other)
        return Value(self.data * other.data, (self, other), Op.MUL)

    def __pow__(self, other):
        """
        Power operation: raises Value to a plain real-number power.

        Example:
            >>> x = Value(3.0)
            >>> y = x ** 2  # y.data = 9.0
        """
        assert isinstance(other, numbers.Real) and not isinstance(other, bool), \
            "Only supporting real-number powers"

        out = Value(self.data ** other, (self,), Op.POW)
        out._exponent = other
        return out

    def relu(self):
        """ReLU activation: max(0, x). The subgradient at 0 is taken as 0."""
        return Value(np.maximum(0.0, self.data), (self,), Op.RELU, name=self.name)

    def _backward(self):
        """Propagate this node's grad into its operands."""
        _LOCAL_BACKWARD[self._op](self)

    def backward(self):
        """
        Perform backpropagation from this Value.

        Traverses the graph in reverse topological order so that every
        node's grad is complete before it is pushed to its operands.
        Grads of derived nodes are scratch space for one pass and are
        reset first; grads of leaves accumulate across calls until
        zero_grad() is called.

        Example:
            >>> x = Value(2.0)
            >>> y = x * 3 + 1
            >>> y.backward()
            >>> print(x.grad)  # dy/dx = 3.0
        """
        topo = topological_order(self)

        for v in topo:
            if v._prev:
                v.grad = np.float64(0.0)

        self.grad = np.float64(1.0)

        for v in reversed(topo):
            v._backward()

        logger.debug("backward swept %d nodes from %r", len(topo), self)

    def zero_grad(self):
        """Reset this Value's grad to zero."""
        self.grad = np.float64(0.0)

    # Reverse and derived operations (use the basic operations defined above)

    def __neg__(self):
        """Negation: -x = x * -1"""
        return self * -1

    def __radd__(self, other):
        """Right addition: other + self (when other is not a Value)"""
        return self + other

    def __sub__(self, other):
        """Subtraction: a - b = a + b * (-1)"""
        other = other if isinstance(other, Value) else Value(other)
        return self + other * Value(-1)

    def __rsub__(self, other):
        """Right subtraction: other - self"""
        return Value(other) - self

    def __rmul__(self, other):
        """Right multiplication: other * self (when other is not a Value)"""
        return self * other

    def __truediv__(self, other):
        """Division: a / b = a * b^(-1)"""
        other = other if isinstance(other, Value) else Value(other)
        return self * other**-1

    def __rtruediv__(self, other):
        """Right division: other / self"""
        return other * self**-1

    def __str__(self):
        # Shortest repr that parses back to the same float
        return repr(float(self.data))

    def __repr__(self):
        name_str = f"'{self.name}' " if self.name else ""
        op_str = f" from {self._op.value}" if self._op is not Op.NONE else ""
        return f"Value({name_str}data={self.data}, grad={self.grad}{op_str})"


def topological_order(root):
    """
    Return every Value reachable from root, operands before consumers.

    Depth-first, visiting operands in order and appending each node once,
    after all of its operands (post-order). Uses an explicit stack so long
    chains do not hit the recursion limit.
    """
    topo = []
    visited = {root}
    stack = [(root, iter(root._prev))]

    while stack:
        node, children = stack[-1]
        for child in children:
            if child not in visited:
                visited.add(child)
                stack.append((child, iter(child._prev)))
                break
        else:
            stack.pop()
            topo.append(node)

    return topo


def _leaf_backward(out):
    pass


def _add_backward(out):
    # d(a+b)/da = 1, d(a+b)/db = 1
    a, b = out._prev
    a.grad += out.grad
    b.grad += out.grad


def _mul_backward(out):
    # d(a*b)/da = b, d(a*b)/db = a
    a, b = out._prev
    a.grad += b.data * out.grad
    b.grad += a.data * out.grad


def _pow_backward(out):
    # d(x^n)/dx = n * x^(n-1)
    (a,) = out._prev
    n = out._exponent
    if n == 0:
        # x^0 is constant, even at x = 0
        return
    a.grad += (n * a.data ** (n - 1)) * out.grad


def _relu_backward(out):
    (a,) = out._prev
    if a.data > 0:
        a.grad += out.grad


_LOCAL_BACKWARD = {
    Op.NONE: _leaf_backward,
    Op.ADD: _add_backward,
    Op.MUL: _mul_backward,
    Op.POW: _pow_backward,
    Op.RELU: _relu_backward,
}
