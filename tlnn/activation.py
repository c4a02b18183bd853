""" Pointwise activation functions paired with their derivatives.

Each derivative is written in terms of the activation's *output* value,
i.e., for an activation :code:`f` and :code:`y = f(x)`, the derivative
callable returns :code:`f'(x)` when given :code:`y`. The backward pass
only ever has the outputs on hand, so the two members of a pair must
always be chosen together.
"""
from collections import namedtuple

import numpy
from scipy.special import expit


Activation = namedtuple('Activation', ['name', 'function', 'derivative'])


def _elu(x):
    # Only the negative branch needs exp; keep positive values out of it
    return numpy.where(x >= 0, x, numpy.expm1(numpy.minimum(x, 0)))


def _elu_derivative(y):
    # For x < 0, y = exp(x) - 1 so exp(x) = y + 1
    return numpy.where(y >= 0, 1.0, y + 1.0)


def _sigmoid(x):
    return expit(x)


def _sigmoid_derivative(y):
    return y * (1.0 - y)


def _relu(x):
    return numpy.maximum(0.0, x)


def _relu_derivative(y):
    return numpy.where(y > 0, 1.0, 0.0)


def _softplus(x):
    return numpy.log1p(numpy.exp(x))


def _softplus_derivative(y):
    # sigmoid(x) expressed through y = log(1 + exp(x))
    return -numpy.expm1(-y)


ELU = Activation('elu', _elu, _elu_derivative)
SIGMOID = Activation('sigmoid', _sigmoid, _sigmoid_derivative)
RELU = Activation('relu', _relu, _relu_derivative)
SOFTPLUS = Activation('softplus', _softplus, _softplus_derivative)

ACTIVATIONS = {
    activation.name: activation
    for activation in (ELU, SIGMOID, RELU, SOFTPLUS)
}

DEFAULT_ACTIVATION = ELU


def get_activation(activation):
    """ Resolve an activation by name or pass an `Activation` through

    Parameters
    ----------
    activation: str or Activation
        One of the keys of :code:`ACTIVATIONS` (case-insensitive),
        or an :class:`Activation` instance.

    Returns
    -------
    activation: Activation
        The matched (function, derivative) pair.
    """
    if isinstance(activation, Activation):
        return activation

    if isinstance(activation, str):
        key = activation.lower()
        if key not in ACTIVATIONS:
            msg = "Unknown activation `{}`; should be one of {}"
            raise ValueError(msg.format(activation, sorted(ACTIVATIONS)))
        return ACTIVATIONS[key]

    msg = "`activation` should be str or Activation, not {}"
    raise TypeError(msg.format(type(activation)))
