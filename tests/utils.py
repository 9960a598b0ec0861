import numpy as np

from matrixnodes import Node, Port, GraphConfig, InvalidConfiguration
from matrixnodes.nodes import register_default_nodes
from matrixnodes.registry import Register


class Port_Ints(Port):

    example_values = [
        0, 1, 20, -15
    ]

    def __init__(self, name='Int'):
        super().__init__(name)

    @classmethod
    def check_value(cls, value):
        if type(value) != int:
            return False, f"Should be int; got: {type(value)}."
        return True, None


class Add_one(Node):
    """ untagged int in, untagged int out """

    @classmethod
    def get_contract(cls, cc):
        if cc.inputs.num_entries() != 1 or cc.outputs.num_entries() != 1:
            raise InvalidConfiguration('Add_one has one input and one output')
        cc.inputs.index(0).set(Port_Ints)
        cc.outputs.index(0).set(Port_Ints)

    def process(self, ctx):
        self._emit_data(ctx, ctx.inputs[0].get() + 1)


class Delay(Node):
    """ emits before its input timestamp, which it promised not to do """

    @classmethod
    def get_contract(cls, cc):
        cc.inputs.index(0).set(Port_Ints)
        cc.outputs.index(0).set(Port_Ints)

    def _onopen(self, ctx):
        ctx.set_offset(0)

    def process(self, ctx):
        self._emit_data(ctx, ctx.inputs[0].get(), ctr=ctx.input_timestamp - 1)


def create_registry():
    registry = Register()
    register_default_nodes(registry)
    registry.nodes.decorator(Add_one)
    registry.nodes.decorator(Delay)
    return registry


def subtract_config(stream_tag="MINUEND", side_tag="SUBTRAHEND"):
    return GraphConfig.from_dict({
        "input_stream": ["input_matrix"],
        "input_side_packet": ["side_matrix"],
        "output_stream": ["output_matrix"],
        "node": [{
            "calculator": "Matrix_subtract",
            "input_stream": [f"{stream_tag}:input_matrix"],
            "input_side_packet": [f"{side_tag}:side_matrix"],
            "output_stream": ["output_matrix"],
        }],
    })


def matrix(*rows):
    return np.array(rows)
