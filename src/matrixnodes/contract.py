from .errors import InvalidConfiguration
from .tag_map import TagMap


class PortEntry():
    def __init__(self, tag, index, name):
        self.tag = tag
        self.index = index
        self.name = name
        self.port = None

    def __str__(self):
        tag = self.tag if self.tag else '<untagged>'
        return f"{tag}:{self.index}:{self.name}"

    def set(self, port_cls):
        """
        Declare the type of values this port carries.
        """
        self.port = port_cls(self.tag if self.tag else self.name)
        self.port.set_key(self.name)
        return self.port


class PortSet():
    """
    All configured ports of one kind (input streams, side packets or output streams) of a node.
    """

    def __init__(self, kind, tag_map: TagMap):
        self.kind = kind
        self.tag_map = tag_map
        self._entries = [PortEntry(*e) for e in tag_map]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __getitem__(self, id):
        return self._entries[id]

    def num_entries(self, tag=None):
        return self.tag_map.num_entries(tag)

    def has_tag(self, tag):
        return self.tag_map.has_tag(tag)

    def get_id(self, tag, index=0):
        return self.tag_map.get_id(tag, index)

    def get(self, tag, index=0):
        return self._entries[self.get_id(tag, index)]

    def tag(self, tag):
        return self.get(tag, 0)

    def index(self, index):
        return self.get('', index)

    def untyped(self):
        return [e for e in self._entries if e.port is None]


class Contract():
    """
    Handed to Node.get_contract while the graph is built, before any data exists.
    The node validates the configured ports and declares their types.
    """

    def __init__(self, node_config):
        self.node_config = node_config
        self.inputs = PortSet('input stream', TagMap(node_config.input_streams))
        self.side_inputs = PortSet('input side packet', TagMap(node_config.input_side_packets))
        self.outputs = PortSet('output stream', TagMap(node_config.output_streams))

    def __str__(self):
        return f"<Contract: {self.node_config.display_name()}>"

    def port_sets(self):
        return [self.inputs, self.side_inputs, self.outputs]

    def check_complete(self):
        for port_set in self.port_sets():
            untyped = port_set.untyped()
            if len(untyped) > 0:
                raise InvalidConfiguration(
                    f'{self.node_config.display_name()}: no type declared for {port_set.kind}(s): {", ".join(map(str, untyped))}')
