import logging
import numbers

import numpy

from tlnn.activation import DEFAULT_ACTIVATION, get_activation
from tlnn.core.layer import Layer
from tlnn.util.validate import as_examples, as_vector


logger = logging.getLogger(__name__)

DEFAULT_EPOCH_COUNT = 50
DEFAULT_LEARNING_RATE = 0.2


class Network:
    """ A hidden layer and an output layer connected in series

    Input (R^n_in) => Hidden (R^n_hidden) => Output (R^n_out)

    The network is trained by per-example gradient descent on the
    squared error, with the deltas computed by backpropagation.
    """

    def __init__(self, n_in, n_hidden, n_out, activation=DEFAULT_ACTIVATION,
                 random_state=None):
        """
        Parameters
        ----------
        n_in: int
            Number of input values.

        n_hidden: int
            Number of hidden units.

        n_out: int
            Number of output units.

        activation: str or Activation, default=ELU
            The activation used by both layers.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
            The hidden layer draws its parameters first.
        """
        activation = get_activation(activation)

        if random_state is None:
            random_state = numpy.random.RandomState()

        self.hidden = Layer(n_in, n_hidden, activation=activation,
                            random_state=random_state)
        self.output = Layer(n_hidden, n_out, activation=activation,
                            random_state=random_state)

    def __repr__(self):
        return "<Network n_in={:d}, n_hidden={:d}, n_out={:d}>".format(
            self.n_in, self.n_hidden, self.n_out)

    @property
    def n_in(self):
        return self.hidden.n_in

    @property
    def n_hidden(self):
        return self.hidden.n_out

    @property
    def n_out(self):
        return self.output.n_out

    def evaluate(self, inputs):
        """
        Parameters
        ----------
        inputs: array-like, shape=(n_in,)
            A single input vector.

        Returns
        -------
        outputs: ndarray, shape=(n_out,)
            The network's prediction; the parameters are not modified.
        """
        inputs = as_vector(inputs, self.n_in, 'inputs')
        hidden_values = self.hidden.propagate(inputs)
        return self.output.propagate(hidden_values)

    def train(self, inputs, expected_outputs, count=None,
              epoch_count=DEFAULT_EPOCH_COUNT,
              learning_rate=DEFAULT_LEARNING_RATE, on_epoch=None):
        """ Run `epoch_count` passes of per-example gradient descent

        Examples are visited in the order given on every epoch; there
        is no shuffling and no early stopping.

        Parameters
        ----------
        inputs: array-like
            Flat buffer of `count` input vectors (example `t` starts at
            offset :code:`t * n_in`), or an array of shape
            (count, n_in).

        expected_outputs: array-like
            The matching target vectors laid out the same way with
            width `n_out`.

        count: int, default=None
            The number of examples. If None, inferred from `inputs`.

        epoch_count: int, default=50
            Number of passes over the examples.

        learning_rate: float, default=0.2
            Step size for the parameter updates.

        on_epoch: callable or list of callables, default=None
            Called after each epoch as :code:`on_epoch(epoch, error)`
            where `error` is the total squared error accumulated over
            the epoch.

        Returns
        -------
        errors: ndarray, shape=(epoch_count,)
            The total squared error of each epoch.
        """
        inputs = as_examples(inputs, self.n_in, count, 'inputs')
        expected_outputs = as_examples(expected_outputs, self.n_out,
                                       inputs.shape[0], 'expected_outputs')

        if (isinstance(epoch_count, bool) or
                not isinstance(epoch_count, numbers.Integral) or
                epoch_count < 0):
            msg = "`epoch_count` should be a non-negative integer (got {!r})"
            raise ValueError(msg.format(epoch_count))

        if (isinstance(learning_rate, bool) or
                not isinstance(learning_rate, numbers.Real) or
                not numpy.isfinite(learning_rate)):
            msg = "`learning_rate` should be a finite number (got {!r})"
            raise ValueError(msg.format(learning_rate))

        if on_epoch is None:
            on_epoch = []
        elif callable(on_epoch):
            on_epoch = [on_epoch]

        # Per-example buffers, reused for every example
        hidden_values = numpy.empty(self.n_hidden)
        hidden_deltas = numpy.empty(self.n_hidden)
        output_values = numpy.empty(self.n_out)
        output_deltas = numpy.empty(self.n_out)

        errors = numpy.zeros(epoch_count)

        for epoch in range(epoch_count):
            total_error = 0.0

            for example_inputs, example_outputs in zip(inputs,
                                                       expected_outputs):
                # Propagate to get the current state
                self.hidden.propagate(example_inputs, hidden_values)
                self.output.propagate(hidden_values, output_values)

                # Backpropagate the error; the hidden deltas need the
                # output layer's weights before they are updated
                _, squared_error = self.output.compute_output_deltas(
                    output_values, example_outputs, output_deltas)
                total_error += squared_error
                self.hidden.compute_deltas(
                    self.output, output_deltas, hidden_values, hidden_deltas)

                self.output.update_weights(
                    hidden_values, output_deltas, learning_rate)
                self.hidden.update_weights(
                    example_inputs, hidden_deltas, learning_rate)

            errors[epoch] = total_error
            logger.info("epoch: %d  error: %.3f", epoch, total_error)

            for func in on_epoch:
                func(epoch, total_error)

        return errors
