class NodeError(Exception):
    """Base class of everything raised by matrixnodes."""


class InvalidConfiguration(NodeError, ValueError):
    """Raised while building a graph, ie a node contract or the wiring is not valid."""


class DimensionMismatch(NodeError, ValueError):

    def __init__(self, msg, shape_a=None, shape_b=None):
        if shape_a is not None and shape_b is not None:
            msg = f"{msg} Got: {tuple(shape_a)} and {tuple(shape_b)}"
        super().__init__(msg)
        self.shape_a = shape_a
        self.shape_b = shape_b


class PacketTypeError(NodeError, TypeError):
    pass


class NodeStateError(NodeError, RuntimeError):
    pass


class GraphError(NodeError, RuntimeError):
    pass
