"""
Neural network building blocks for scalargrad.

Neurons, layers and multi-layer perceptrons built from scalar Values.
Calling any of them builds a fresh computation graph.
"""

import logging

import numpy as np
from scalargrad.engine import Value

logger = logging.getLogger(__name__)


class Module:
    """
    Base class for all neural network modules.

    Provides common functionality for managing parameters and gradients.
    """

    def zero_grad(self):
        """
        Reset all gradients to zero.

        Call this before each backward pass to avoid accumulating gradients
        from multiple backward passes.
        """
        for p in self.parameters():
            p.zero_grad()

    def parameters(self):
        """
        Return a list of all trainable parameters (weights and biases).

        Override this in subclasses to return actual parameters.
        """
        return []


class Neuron(Module):
    """
    A single neuron: output = activation(b + w0*x0 + w1*x1 + ...)

    Args:
        nin: Number of inputs
        nonlin: If True, apply ReLU activation (default: True)
        weights: Optional pre-initialized weights (length nin)
        bias: Optional pre-initialized bias (default: 0)
        rng: numpy Generator used to draw weights uniformly in [0, 1)

    Example:
        >>> n = Neuron(3, rng=np.random.default_rng(0))
        >>> y = n([1.0, 2.0, 3.0])
    """

    def __init__(self, nin, nonlin=True, weights=None, bias=None, rng=None):
        if weights is not None:
            if len(weights) != nin:
                raise ValueError(f"expected {nin} weights, got {len(weights)}")
            self.w = [Value(wi) for wi in weights]
        else:
            rng = rng if rng is not None else np.random.default_rng()
            self.w = [Value(wi) for wi in rng.uniform(0.0, 1.0, nin)]

        self.b = Value(bias if bias is not None else 0.0)
        self.nonlin = nonlin

    def __call__(self, x):
        """
        Forward pass over the common length of weights and inputs.

        Extra inputs or extra weights are ignored.
        """
        if len(x) != len(self.w):
            logger.debug("%r called with %d inputs, using %d",
                         self, len(x), min(len(x), len(self.w)))

        act = self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * xi

        return act.relu() if self.nonlin else act

    def parameters(self):
        """Bias first, then weights in order."""
        return [self.b] + self.w

    def __repr__(self):
        return f"{'ReLU' if self.nonlin else 'Linear'}Neuron({len(self.w)})"


class Layer(Module):
    """
    A fully-connected layer of nout neurons, each taking the same nin inputs.

    Extra keyword arguments (nonlin, rng) are passed to every Neuron.
    """

    def __init__(self, nin, nout, **kwargs):
        self.neurons = [Neuron(nin, **kwargs) for _ in range(nout)]

    def __call__(self, x):
        """Apply every neuron to x; returns the list of their outputs."""
        return [n(x) for n in self.neurons]

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        nin = len(self.neurons[0].w) if self.neurons else 0
        return f"Layer({nin}, {len(self.neurons)})"


class MLP(Module):
    """
    Multi-Layer Perceptron: a sequence of fully-connected layers.

    Args:
        nin: Number of input features
        nouts: List of output sizes for each layer
               Example: [4, 4, 1] creates 3 layers: input→4→4→1
        linear_output: If True, the last layer has no activation.
                       By default every layer applies ReLU.
        rng: numpy Generator shared by all neurons for weight init

    Example:
        >>> mlp = MLP(3, [4, 4, 1], rng=np.random.default_rng(42))
        >>> out = mlp([2.0, 3.0, -1.0])  # list with one Value
        >>> mlp.zero_grad()
        >>> out[0].backward()
    """

    def __init__(self, nin, nouts, linear_output=False, rng=None):
        rng = rng if rng is not None else np.random.default_rng()

        # Build layer sizes: [input_size, hidden1, hidden2, ..., output_size]
        layer_sizes = [nin] + list(nouts)

        self.layers = []
        for i in range(len(nouts)):
            is_output_layer = (i == len(nouts) - 1)
            self.layers.append(Layer(
                layer_sizes[i],
                layer_sizes[i + 1],
                nonlin=not (linear_output and is_output_layer),
                rng=rng,
            ))

    def __call__(self, x):
        """Pass x through all layers; returns the last layer's outputs."""
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self):
        """Return all trainable parameters from all layers."""
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        layer_str = ' → '.join(str(layer) for layer in self.layers)
        return f"MLP[\n  {layer_str}\n]"
