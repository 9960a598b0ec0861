from enum import Enum

import numpy as np

from ..errors import DimensionMismatch, InvalidConfiguration
from ..node import Node
from ..port import Port_Matrix

MINUEND = "MINUEND"
SUBTRAHEND = "SUBTRAHEND"


class Role(Enum):
    INPUT_IS_MINUEND = 1
    INPUT_IS_SUBTRAHEND = 2


class Matrix_subtract(Node):
    """
    Subtracts the input side packet matrix from the input stream matrix or vice versa.

    Which one is the minuend is decided by the tags (MINUEND vs SUBTRAHEND):

        {"calculator": "Matrix_subtract",
         "input_stream": ["MINUEND:input_matrix"],
         "input_side_packet": ["SUBTRAHEND:side_matrix"],
         "output_stream": ["output_matrix"]}

    Both matrices must have the same dimension, the output is emitted at the input timestamp.
    """

    def __init__(self, name="Subtract", **kwargs):
        super().__init__(name, **kwargs)
        self.role = None
        self._input_id = None
        self._side_id = None

    @classmethod
    def get_contract(cls, cc):
        if cc.inputs.num_entries() != 1 or cc.side_inputs.num_entries() != 1:
            raise InvalidConfiguration(
                f"{cls.__name__} only accepts exactly one input stream and one input side packet")

        if cc.inputs.has_tag(MINUEND) and cc.side_inputs.has_tag(SUBTRAHEND):
            cc.inputs.tag(MINUEND).set(Port_Matrix)
            cc.side_inputs.tag(SUBTRAHEND).set(Port_Matrix)
        elif cc.inputs.has_tag(SUBTRAHEND) and cc.side_inputs.has_tag(MINUEND):
            cc.inputs.tag(SUBTRAHEND).set(Port_Matrix)
            cc.side_inputs.tag(MINUEND).set(Port_Matrix)
        else:
            raise InvalidConfiguration("Must specify exactly one minuend and one subtrahend")

        if cc.outputs.num_entries() != 1:
            raise InvalidConfiguration(f"{cls.__name__} has exactly one output stream")
        cc.outputs.index(0).set(Port_Matrix)

    def _onopen(self, ctx):
        # the output is at the same timestamp as the input
        ctx.set_offset(0)

        if ctx.inputs.has_tag(MINUEND):
            self.role = Role.INPUT_IS_MINUEND
            self._input_id = ctx.inputs.get_id(MINUEND)
            self._side_id = ctx.side_inputs.get_id(SUBTRAHEND)
        else:
            self.role = Role.INPUT_IS_SUBTRAHEND
            self._input_id = ctx.inputs.get_id(SUBTRAHEND)
            self._side_id = ctx.side_inputs.get_id(MINUEND)
        self.debug('Role:', self.role.name)

    def process(self, ctx):
        input_matrix = ctx.inputs[self._input_id].get()
        side_input_matrix = ctx.side_inputs[self._side_id].get()

        if self.role is Role.INPUT_IS_MINUEND:
            minuend, subtrahend = input_matrix, side_input_matrix
        else:
            minuend, subtrahend = side_input_matrix, input_matrix

        if minuend.shape[0] != subtrahend.shape[0] \
                or minuend.shape[1] != subtrahend.shape[1]:
            raise DimensionMismatch(
                "Input matrix and the input side matrix must have the same dimension.",
                input_matrix.shape, side_input_matrix.shape)

        self._emit_data(ctx, np.subtract(minuend, subtrahend))
