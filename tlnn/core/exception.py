class DegenerateLayer(ValueError):
    """ Raised when a layer is constructed with a width less than one
    """


class DimensionMismatch(ValueError):
    """ Raised when a buffer or a layer pairing doesn't match the
    declared widths
    """
