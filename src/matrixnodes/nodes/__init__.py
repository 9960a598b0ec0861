from .matrix_subtract import Matrix_subtract, Role


def register_default_nodes(registry):
    """
    Registers the nodes shipped with matrixnodes on the given Register.
    """
    registry.nodes.register('Matrix_subtract', Matrix_subtract)
