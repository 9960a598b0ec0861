from .registry import Register
# There is one global registry of nodes
# it is only filled the first time it is needed, so that packages can still register their nodes before
REGISTRY = Register()

from .logger import get_logger
logger = get_logger()


def get_registry():
    global REGISTRY
    if not REGISTRY.collected_installed:
        # --- first hook up the nodes shipped with matrixnodes
        from .nodes import register_default_nodes
        logger.debug('registering default nodes')
        register_default_nodes(REGISTRY)

        # --- now collect all installed packages
        REGISTRY.collect_installed()

    return REGISTRY


from .errors import NodeError, InvalidConfiguration, DimensionMismatch, PacketTypeError, NodeStateError, GraphError
from .packet import Packet
from .port import Port, Port_Any, Port_Matrix
from .node import Node, State
from .graph import Graph
from .graph_config import GraphConfig, NodeConfig
from .logger import LogLevel, setup_logging
