import logging


LINE_FORMAT = '[%(asctime)s] %(levelname)-8s %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class CoreLogger(logging.Logger):
    """ A logger writing to stdout and/or a file in a fixed format
    """
    def __init__(self, name='tlnn', filename=None, stdout=True):
        formatter = logging.Formatter(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

        logging.Logger.__init__(self, name)
        self.setLevel(logging.DEBUG)

        self.file = filename
        self.stdout = stdout

        if filename is not None:
            fhandler = logging.FileHandler(filename, mode='w')
            fhandler.setFormatter(formatter)
            self.addHandler(fhandler)

        if self.stdout:
            shandler = logging.StreamHandler()
            shandler.setFormatter(formatter)
            self.addHandler(shandler)

    def progress(self, msg, i, n):
        msg = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
        self.info(msg % i)


def setup_logging(filename=None, level=logging.INFO):
    """ Sets up logging formatting for scripts

    Parameters
    ----------
    filename: str, default=None
        If given, log records are written to this file instead of
        standard error.

    level: int, default=logging.INFO
        The root logger level.
    """
    logging.basicConfig(
        filename=filename, format=LINE_FORMAT,
        datefmt=DATE_FORMAT, level=level)
