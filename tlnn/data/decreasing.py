import numpy


INPUTS = (0.0, 0.2, 0.8, 1.0)
OUTPUTS = (1.0, 0.8, 0.2, 0.0)


def make_dataset():
    """
    The four example points of the decreasing line y = 1 - x.

    Returns
    -------
    inputs, outputs: ndarray, ndarray
        Flat buffers of the inputs and expected outputs.
    """
    return numpy.array(INPUTS), numpy.array(OUTPUTS)


def make_noisy_dataset(n, sigma=0.0, random_state=None):
    """
    Sample points of the line y = 1 - x.

    Parameters
    ----------
    n: int
        The number of samples.

    sigma: float, default=0.0
        Standard deviation of the additive Gaussian noise on the outputs.

    random_state: numpy.random.RandomState, default=None
        RandomState object for reproducible results.

    Returns
    -------
    inputs, outputs: ndarray, ndarray
        The inputs are drawn uniformly from [0, 1).
    """
    if n < 1:
        raise ValueError("`n` should be >= 1 (got {!r})".format(n))
    if sigma < 0:
        raise ValueError("`sigma` should be >= 0 (got {!r})".format(sigma))

    random_state = (random_state if random_state is not None
                    else numpy.random.RandomState())

    inputs = random_state.random_sample(n)
    outputs = 1.0 - inputs
    if sigma > 0:
        outputs += sigma * random_state.randn(n)

    return inputs, outputs
