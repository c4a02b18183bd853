import numbers

import numpy

from tlnn.core.exception import DegenerateLayer, DimensionMismatch


def check_width(value, name):
    """ Validate a layer width, returning it as an int
    """
    if (isinstance(value, bool) or
            not isinstance(value, numbers.Integral) or value < 1):
        msg = "`{}` should be an integer >= 1 (got {!r})"
        raise DegenerateLayer(msg.format(name, value))
    return int(value)


def check_buffer(buffer, width, name):
    """ Validate a caller-provided output buffer, returning it unchanged

    The buffer is written in place and must be a float64 array of
    shape (width,).
    """
    if not isinstance(buffer, numpy.ndarray):
        msg = "`{}` should be numpy.ndarray, not {}"
        raise TypeError(msg.format(name, type(buffer)))

    if buffer.dtype != numpy.float64:
        msg = "`{}` was dtype {} but should be float64"
        raise TypeError(msg.format(name, buffer.dtype))

    if buffer.shape != (width,):
        msg = "`{}` is shape {} but should be {}"
        raise DimensionMismatch(msg.format(name, buffer.shape, (width,)))

    return buffer


def as_vector(values, width, name):
    """ Return `values` as a flat float64 array of length `width`

    A single row or column, shape (1, width) or (width, 1), is also
    accepted. Arrays of the right dtype are returned as views.
    """
    arr = numpy.asarray(values, dtype=numpy.float64)

    if arr.ndim > 1 and arr.shape not in ((1, width), (width, 1)):
        msg = "`{}` is shape {} but should be ({},)"
        raise DimensionMismatch(msg.format(name, arr.shape, width))

    arr = arr.reshape(-1)
    if arr.shape[0] != width:
        msg = "`{}` has {} values but should have {}"
        raise DimensionMismatch(msg.format(name, arr.shape[0], width))
    return arr


def as_examples(values, width, count=None, name='values'):
    """ Arrange a flat buffer of examples into shape (count, width)

    Parameters
    ----------
    values: array-like
        Either a flat buffer where example `t` occupies the slice
        starting at offset :code:`t * width`, or an array already
        shaped (count, width).

    width: int
        The number of values per example.

    count: int, default=None
        The number of examples. If None, it is inferred from the size
        of `values`.

    name: str
        Used in error messages.

    Returns
    -------
    examples: ndarray, shape=(count, width)
    """
    arr = numpy.asarray(values, dtype=numpy.float64)

    if arr.ndim > 2:
        msg = "`{}` has {} dimensions but should have 1 or 2"
        raise DimensionMismatch(msg.format(name, arr.ndim))

    if arr.ndim == 2 and arr.shape[1] != width:
        msg = "`{}` is shape {} but examples should have width {}"
        raise DimensionMismatch(msg.format(name, arr.shape, width))

    if count is None:
        if arr.size % width != 0:
            msg = "`{}` has {} values which is not a multiple of width {}"
            raise DimensionMismatch(msg.format(name, arr.size, width))
        count = arr.size // width
    elif (isinstance(count, bool) or
            not isinstance(count, numbers.Integral) or count < 0):
        msg = "`count` should be a non-negative integer (got {!r})"
        raise ValueError(msg.format(count))

    if arr.size != count * width:
        msg = "`{}` has {} values but should have {} ({} x {})"
        raise DimensionMismatch(
            msg.format(name, arr.size, count * width, count, width))

    return arr.reshape(int(count), width)
