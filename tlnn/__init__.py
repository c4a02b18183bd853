# flake8: noqa

from ._version import version as __version__

from .activation import (
    Activation,
    ACTIVATIONS,
    ELU,
    get_activation,
    RELU,
    SIGMOID,
    SOFTPLUS,
)

from .core.exception import DegenerateLayer, DimensionMismatch
from .core.layer import Layer
from .core.network import Network
