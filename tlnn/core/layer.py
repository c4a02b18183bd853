import numpy

from tlnn.activation import DEFAULT_ACTIVATION, get_activation
from tlnn.core.exception import DimensionMismatch
from tlnn.util.validate import as_vector, check_buffer, check_width


# Parameters are initialized uniformly over [INIT_LOW, INIT_LOW + INIT_SPAN)
INIT_LOW = 0.5
INIT_SPAN = 0.4


class Layer:
    """ A fully connected layer: an affine transform followed by a
    pointwise activation.

    params: W, where W[o, i] = weight from input i to output unit o.
            b, where b[o] = bias into output unit o.

    For a single input vector, the computation is::

        outputs = activation(dot(W, inputs) + b)

    The parameter arrays are allocated once and are only ever modified
    in place.
    """

    def __init__(self, n_in, n_out, activation=DEFAULT_ACTIVATION,
                 random_state=None):
        """
        Parameters
        ----------
        n_in: int
            Number of input values.

        n_out: int
            Number of output units.

        activation: str or Activation, default=ELU
            The matched activation and derivative pair; see
            :mod:`tlnn.activation`.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        self._n_in = check_width(n_in, 'n_in')
        self._n_out = check_width(n_out, 'n_out')
        self._activation = get_activation(activation)

        if random_state is None:
            random_state = numpy.random.RandomState()

        self.W = numpy.empty((self._n_out, self._n_in))
        self.b = numpy.empty(self._n_out)

        self.randomize_params(random_state)

    def __repr__(self):
        return "<Layer n_in={:d}, n_out={:d}, activation={}>".format(
            self.n_in, self.n_out, self.activation.name)

    @property
    def n_in(self):
        return self._n_in

    @property
    def n_out(self):
        return self._n_out

    @property
    def activation(self):
        return self._activation

    def randomize_params(self, random_state):
        """ Draw every weight, then every bias, independently from
        the uniform distribution over [INIT_LOW, INIT_LOW + INIT_SPAN)
        """
        self.W[...] = INIT_LOW + INIT_SPAN * random_state.random_sample(
            self.W.shape)
        self.b[...] = INIT_LOW + INIT_SPAN * random_state.random_sample(
            self.b.shape)

    def get_params(self):
        """ Returns the live parameter arrays as [W, b]
        """
        return [self.W, self.b]

    def set_params(self, W, b):
        """ Copy the provided values into the parameter arrays
        """
        W = numpy.asarray(W, dtype=numpy.float64)
        if W.shape != self.W.shape:
            msg = "`W` is shape {} but should be {}"
            raise DimensionMismatch(msg.format(W.shape, self.W.shape))

        b = numpy.asarray(b, dtype=numpy.float64)
        if b.shape != self.b.shape:
            msg = "`b` is shape {} but should be {}"
            raise DimensionMismatch(msg.format(b.shape, self.b.shape))

        self.W[...] = W
        self.b[...] = b

    def _output_buffer(self, buffer, name):
        if buffer is None:
            return numpy.empty(self.n_out)
        return check_buffer(buffer, self.n_out, name)

    def propagate(self, inputs, outputs=None):
        """ Compute the layer outputs for a single input vector

        Parameters
        ----------
        inputs: array-like, shape=(n_in,)
            The input values.

        outputs: ndarray, shape=(n_out,), default=None
            Float64 buffer to write the outputs into, returned as is.
            A new array is allocated if not provided.

        Returns
        -------
        outputs: ndarray, shape=(n_out,)
        """
        inputs = as_vector(inputs, self.n_in, 'inputs')
        outputs = self._output_buffer(outputs, 'outputs')

        outputs[:] = self.activation.function(numpy.dot(self.W, inputs) +
                                              self.b)
        return outputs

    def compute_output_deltas(self, output_values, expected_values,
                              deltas=None):
        """ Compute the deltas of an output layer under the squared
        error loss.

        Parameters
        ----------
        output_values: array-like, shape=(n_out,)
            The outputs of this layer from :meth:`propagate`.

        expected_values: array-like, shape=(n_out,)
            The target outputs.

        deltas: ndarray, shape=(n_out,), default=None
            Buffer to write the deltas into.

        Returns
        -------
        deltas, squared_error: ndarray, float
            The per-unit deltas, and the sum over units of the squared
            difference between `expected_values` and `output_values`.
        """
        output_values = as_vector(output_values, self.n_out, 'output_values')
        expected_values = as_vector(expected_values, self.n_out,
                                    'expected_values')
        deltas = self._output_buffer(deltas, 'deltas')

        error = expected_values - output_values
        deltas[:] = error * self.activation.derivative(output_values)

        return deltas, float(numpy.dot(error, error))

    def compute_deltas(self, next_layer, next_deltas, values, deltas=None):
        """ Back-propagate deltas from the downstream layer through
        this layer's outputs.

        Only the downstream layer's weights are read, so this must be
        called before `next_layer` updates its weights.

        Parameters
        ----------
        next_layer: Layer
            The layer fed by this one. Its `n_in` must equal this
            layer's `n_out`.

        next_deltas: array-like, shape=(next_layer.n_out,)
            The deltas of `next_layer`.

        values: array-like, shape=(n_out,)
            The outputs of this layer from :meth:`propagate`.

        deltas: ndarray, shape=(n_out,), default=None
            Buffer to write the deltas into.

        Returns
        -------
        deltas: ndarray, shape=(n_out,)
        """
        if next_layer.n_in != self.n_out:
            msg = "`next_layer` takes {} inputs but this layer has {} outputs"
            raise DimensionMismatch(msg.format(next_layer.n_in, self.n_out))

        next_deltas = as_vector(next_deltas, next_layer.n_out, 'next_deltas')
        values = as_vector(values, self.n_out, 'values')
        deltas = self._output_buffer(deltas, 'deltas')

        error = numpy.dot(next_layer.W.T, next_deltas)
        deltas[:] = error * self.activation.derivative(values)

        return deltas

    def update_weights(self, inputs, deltas, learning_rate):
        """ Take a gradient step on the parameters, in place

        `inputs` must be the same inputs that produced the outputs from
        which `deltas` were computed.
        """
        inputs = as_vector(inputs, self.n_in, 'inputs')
        deltas = as_vector(deltas, self.n_out, 'deltas')

        change = learning_rate * deltas
        self.W += numpy.outer(change, inputs)
        self.b += change
