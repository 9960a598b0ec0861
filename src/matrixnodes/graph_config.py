import json

from .errors import InvalidConfiguration


def _as_list(value, field):
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise InvalidConfiguration(f'"{field}" must be a string or a list of strings. Got: {value!r}')


class NodeConfig():
    """
    One node of a graph config, ie:

        {"calculator": "Matrix_subtract",
         "input_stream": ["SUBTRAHEND:input_matrix"],
         "input_side_packet": ["MINUEND:side_matrix"],
         "output_stream": ["output_matrix"]}
    """

    def __init__(self, calculator, input_streams=(), output_streams=(), input_side_packets=(), name=None, options=None):
        if not isinstance(calculator, str) or calculator == '':
            raise InvalidConfiguration(f'Node needs a calculator name. Got: {calculator!r}')
        self.calculator = calculator
        self.name = name
        self.input_streams = _as_list(input_streams, 'input_stream')
        self.output_streams = _as_list(output_streams, 'output_stream')
        self.input_side_packets = _as_list(input_side_packets, 'input_side_packet')
        self.options = dict(options or {})

    def display_name(self):
        return self.name if self.name is not None else self.calculator

    def to_dict(self):
        res = {
            "calculator": self.calculator,
            "input_stream": list(self.input_streams),
            "output_stream": list(self.output_streams),
            "input_side_packet": list(self.input_side_packets),
        }
        if self.name is not None:
            res["name"] = self.name
        if len(self.options) > 0:
            res["options"] = dict(self.options)
        return res

    @classmethod
    def from_dict(cls, item):
        if not isinstance(item, dict):
            raise InvalidConfiguration(f'Node config must be a dict. Got: {item!r}')
        unknown = set(item.keys()) - {"calculator", "name", "input_stream", "output_stream", "input_side_packet", "options"}
        if len(unknown) > 0:
            raise InvalidConfiguration(f'Unknown node config fields: {", ".join(sorted(unknown))}')
        return cls(calculator=item.get("calculator"),
                   input_streams=item.get("input_stream"),
                   output_streams=item.get("output_stream"),
                   input_side_packets=item.get("input_side_packet"),
                   name=item.get("name"),
                   options=item.get("options"))


class GraphConfig():
    def __init__(self, nodes=(), input_streams=(), output_streams=(), input_side_packets=()):
        self.nodes = list(nodes)
        self.input_streams = _as_list(input_streams, 'input_stream')
        self.output_streams = _as_list(output_streams, 'output_stream')
        self.input_side_packets = _as_list(input_side_packets, 'input_side_packet')

        # node names are used to identify nodes in logs and the dot graph
        for i, node in enumerate(self.nodes):
            if node.name is None:
                node.name = f"{node.calculator.lower()}_{i}"
        names = [n.name for n in self.nodes]
        if len(set(names)) != len(names):
            raise InvalidConfiguration('May not have two nodes with the same name')

    def to_dict(self):
        return {
            "input_stream": list(self.input_streams),
            "output_stream": list(self.output_streams),
            "input_side_packet": list(self.input_side_packets),
            "node": [n.to_dict() for n in self.nodes],
        }

    @classmethod
    def from_dict(cls, items):
        if not isinstance(items, dict):
            raise InvalidConfiguration(f'Graph config must be a dict. Got: {type(items)}')
        return cls(nodes=[NodeConfig.from_dict(n) for n in items.get("node", [])],
                   input_streams=items.get("input_stream"),
                   output_streams=items.get("output_stream"),
                   input_side_packets=items.get("input_side_packet"))

    def save(self, path):
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path):
        with open(path, 'r') as f:
            json_str = json.load(f)
        return cls.from_dict(json_str)
