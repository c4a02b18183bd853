import logging
import unittest

import numpy

from tlnn.core.exception import DegenerateLayer, DimensionMismatch
from tlnn.core.network import Network
from tlnn.data.decreasing import make_dataset


class TestNetwork(unittest.TestCase):

    def test_dimension_contract(self):
        random_state = numpy.random.RandomState(123)

        for n_in, n_hidden, n_out in [(1, 1, 1), (1, 8, 1), (3, 5, 2),
                                      (4, 2, 6)]:
            net = Network(n_in, n_hidden, n_out, random_state=random_state)

            self.assertEqual(net.hidden.n_out, net.output.n_in)
            self.assertEqual((net.n_in, net.n_hidden, net.n_out),
                             (n_in, n_hidden, n_out))

            outputs = net.evaluate(random_state.rand(n_in))
            self.assertEqual(outputs.shape, (n_out,))

            with self.assertRaises(DimensionMismatch):
                net.evaluate(random_state.rand(n_in + 1))

    def test_construction_rejects_zero_width(self):
        for dims in [(0, 8, 1), (1, 0, 1), (1, 8, 0)]:
            with self.assertRaises(DegenerateLayer):
                Network(*dims)

    def test_evaluate_is_deterministic(self):
        net = Network(2, 4, 3, random_state=numpy.random.RandomState(5))
        params = [p.copy() for layer in (net.hidden, net.output)
                  for p in layer.get_params()]

        x = [0.3, -0.7]
        first = net.evaluate(x)
        second = net.evaluate(x)

        self.assertTrue((first == second).all())
        for before, after in zip(params, [p for layer in (net.hidden,
                                                          net.output)
                                          for p in layer.get_params()]):
            self.assertTrue((before == after).all())

    def test_seeded_construction_is_reproducible(self):
        net1 = Network(1, 8, 1, random_state=numpy.random.RandomState(9))
        net2 = Network(1, 8, 1, random_state=numpy.random.RandomState(9))

        inputs, outputs = make_dataset()
        errors1 = net1.train(inputs, outputs)
        errors2 = net2.train(inputs, outputs)

        self.assertTrue((errors1 == errors2).all())
        self.assertTrue((net1.hidden.W == net2.hidden.W).all())
        self.assertTrue((net1.output.b == net2.output.b).all())

    def test_error_decreases(self):
        net = Network(1, 8, 1, random_state=numpy.random.RandomState(1234))
        inputs, outputs = make_dataset()

        errors = net.train(inputs, outputs, count=4, epoch_count=50,
                           learning_rate=0.2)

        self.assertEqual(errors.shape, (50,))
        self.assertLess(errors[49], 0.5 * errors[0])

    def test_learned_function_is_decreasing(self):
        net = Network(1, 8, 1, random_state=numpy.random.RandomState(1234))
        inputs, outputs = make_dataset()

        net.train(inputs, outputs, count=4, epoch_count=50,
                  learning_rate=0.2)

        predictions = numpy.array([net.evaluate([x])[0] for x in inputs])

        self.assertTrue((numpy.diff(predictions) <= 0).all())
        self.assertLess(numpy.abs(predictions - outputs).max(), 0.25)

    def test_train_matches_manual_steps(self):
        net = Network(2, 3, 2, random_state=numpy.random.RandomState(77))
        ref = Network(2, 3, 2, random_state=numpy.random.RandomState(77))

        random_state = numpy.random.RandomState(0)
        inputs = random_state.rand(5, 2)
        outputs = random_state.rand(5, 2)
        learning_rate = 0.05

        errors = net.train(inputs.ravel(), outputs.ravel(), count=5,
                           epoch_count=2, learning_rate=learning_rate)

        for epoch in range(2):
            total = 0.0
            for x, t in zip(inputs, outputs):
                h = ref.hidden.propagate(x)
                o = ref.output.propagate(h)
                output_deltas, squared_error = \
                    ref.output.compute_output_deltas(o, t)
                total += squared_error
                hidden_deltas = ref.hidden.compute_deltas(
                    ref.output, output_deltas, h)
                ref.output.update_weights(h, output_deltas, learning_rate)
                ref.hidden.update_weights(x, hidden_deltas, learning_rate)

            self.assertAlmostEqual(errors[epoch], total, places=12)

        self.assertLess(numpy.abs(net.hidden.W - ref.hidden.W).max(), 1e-12)
        self.assertLess(numpy.abs(net.hidden.b - ref.hidden.b).max(), 1e-12)
        self.assertLess(numpy.abs(net.output.W - ref.output.W).max(), 1e-12)
        self.assertLess(numpy.abs(net.output.b - ref.output.b).max(), 1e-12)

    def test_train_accepts_flat_or_2d_buffers(self):
        random_state = numpy.random.RandomState(3)
        inputs = random_state.rand(6, 2)
        outputs = random_state.rand(6, 1)

        net1 = Network(2, 4, 1, random_state=numpy.random.RandomState(4))
        net2 = Network(2, 4, 1, random_state=numpy.random.RandomState(4))

        errors1 = net1.train(inputs.ravel(), outputs.ravel(), count=6,
                             epoch_count=3)
        errors2 = net2.train(inputs, outputs, epoch_count=3)

        self.assertTrue((errors1 == errors2).all())

    def test_train_rejects_mismatched_buffers(self):
        net = Network(2, 3, 1, random_state=numpy.random.RandomState(4))
        W = net.hidden.W.copy()

        with self.assertRaises(DimensionMismatch):
            # 5 values is not a multiple of the input width
            net.train(numpy.zeros(5), numpy.zeros(2))
        with self.assertRaises(DimensionMismatch):
            net.train(numpy.zeros(4), numpy.zeros(3))
        with self.assertRaises(DimensionMismatch):
            net.train(numpy.zeros(4), numpy.zeros(2), count=3)

        self.assertTrue((net.hidden.W == W).all())

    def test_train_rejects_bad_arguments(self):
        net = Network(1, 2, 1)
        inputs, outputs = make_dataset()

        with self.assertRaises(ValueError):
            net.train(inputs, outputs, epoch_count=-1)
        with self.assertRaises(ValueError):
            net.train(inputs, outputs, epoch_count=2.5)
        with self.assertRaises(ValueError):
            net.train(inputs, outputs, learning_rate=float('nan'))
        with self.assertRaises(ValueError):
            net.train(inputs, outputs, learning_rate='0.2')
        with self.assertRaises(ValueError):
            net.train(inputs, outputs, learning_rate=True)

    def test_rejects_2d_buffers_of_wrong_width(self):
        net = Network(2, 4, 1, random_state=numpy.random.RandomState(4))
        W = net.hidden.W.copy()

        # Six values would fit three examples of width 2, but the rows
        # have width 3
        with self.assertRaises(DimensionMismatch):
            net.train(numpy.arange(6.0).reshape(2, 3), numpy.zeros((3, 1)))
        with self.assertRaises(DimensionMismatch):
            net.train(numpy.zeros((3, 2)), numpy.zeros((1, 3)))

        self.assertTrue((net.hidden.W == W).all())

        net = Network(4, 2, 1)
        with self.assertRaises(DimensionMismatch):
            net.evaluate([[1.0, 2.0], [3.0, 4.0]])

        # A single row or column is still a valid input vector
        self.assertEqual(net.evaluate([[1.0, 2.0, 3.0, 4.0]]).shape, (1,))

    def test_train_zero_epochs_and_empty_examples(self):
        net = Network(1, 2, 1, random_state=numpy.random.RandomState(4))
        W = net.hidden.W.copy()
        inputs, outputs = make_dataset()

        errors = net.train(inputs, outputs, epoch_count=0)
        self.assertEqual(errors.shape, (0,))

        errors = net.train([], [], count=0, epoch_count=3)
        self.assertTrue((errors == 0).all())
        self.assertTrue((net.hidden.W == W).all())

    def test_on_epoch_callbacks(self):
        net = Network(1, 8, 1, random_state=numpy.random.RandomState(10))
        inputs, outputs = make_dataset()

        calls = []
        epochs = []

        def record(epoch, error):
            calls.append(error)

        def record_epoch(epoch, error):
            epochs.append(epoch)

        errors = net.train(inputs, outputs, epoch_count=5, on_epoch=record)
        self.assertEqual(calls, list(errors))

        net.train(inputs, outputs, epoch_count=3,
                  on_epoch=[record, record_epoch])
        self.assertEqual(epochs, [0, 1, 2])
        self.assertEqual(len(calls), 8)

    def test_train_logs_each_epoch(self):
        net = Network(1, 8, 1, random_state=numpy.random.RandomState(10))
        inputs, outputs = make_dataset()

        with self.assertLogs('tlnn.core.network', level=logging.INFO) as cm:
            errors = net.train(inputs, outputs, epoch_count=4)

        self.assertEqual(len(cm.output), 4)
        self.assertIn("epoch: 3  error: {:.3f}".format(errors[3]),
                      cm.output[-1])

    def test_repr(self):
        net = Network(1, 8, 1)
        self.assertEqual(repr(net), "<Network n_in=1, n_hidden=8, n_out=1>")
