""" This module provides a few simple `on_epoch` functions that can be
used in the :meth:`tlnn.Network.train` member function
"""


def collect_errors(error_list):
    """ Collects the per-epoch errors. Errors are appended to
    :code:`error_list` and so an empty list should be provided. Usage::

        errors = []
        network.train(inputs, outputs, on_epoch=[collect_errors(errors)])
    """

    def on_epoch(epoch, error):
        error_list.append(error)

    return on_epoch


def log_progress(logger, epoch_count, every=1):
    """ Log the epoch error as progress on :code:`logger` every
    :code:`every` epochs. :code:`logger` should provide a
    :code:`progress(msg, i, n)` method, e.g.,
    :class:`tlnn.core.logger.CoreLogger`
    """
    if every < 1:
        msg = "`every` should be >= 1 (got {!r})"
        raise ValueError(msg.format(every))

    def on_epoch(epoch, error):
        if epoch % every == 0 or epoch == epoch_count - 1:
            logger.progress("error: {:.5f}".format(error),
                            epoch + 1, epoch_count)

    return on_epoch
