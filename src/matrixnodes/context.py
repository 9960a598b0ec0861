from .errors import GraphError
from .packet import Packet


class InputSlot():
    def __init__(self, entry):
        self.entry = entry
        self.packet = None

    def __str__(self):
        return f"<Input: {self.entry}>"

    def is_empty(self):
        return self.packet is None

    def get(self):
        if self.packet is None:
            raise GraphError(f'No value on {self.entry} for the current invocation.')
        return self.packet.value

    @property
    def timestamp(self):
        return None if self.packet is None else self.packet.timestamp


class OutputSlot():
    def __init__(self, entry):
        self.entry = entry
        self.packets = []

    def __str__(self):
        return f"<Output: {self.entry}>"

    def add(self, value, timestamp):
        self.packets.append(Packet(value, timestamp))

    def add_packet(self, packet):
        self.packets.append(packet)


class Slots():
    slot_cls = None

    def __init__(self, port_set):
        self.port_set = port_set
        self._slots = [self.slot_cls(entry) for entry in port_set]

    def __iter__(self):
        return iter(self._slots)

    def __len__(self):
        return len(self._slots)

    def __getitem__(self, id):
        return self._slots[id]

    def num_entries(self, tag=None):
        return self.port_set.num_entries(tag)

    def has_tag(self, tag):
        return self.port_set.has_tag(tag)

    def get_id(self, tag, index=0):
        return self.port_set.get_id(tag, index)

    def tag(self, tag):
        return self._slots[self.get_id(tag)]

    def index(self, index):
        return self._slots[self.get_id('', index)]


class InputSlots(Slots):
    slot_cls = InputSlot


class OutputSlots(Slots):
    slot_cls = OutputSlot


class Context():
    """
    Per node runtime view on the graph.

    The engine fills the inputs before each process call and collects the outputs afterwards.
    Outputs added during a call are only forwarded if the call returns without raising.
    """

    def __init__(self, contract):
        self.contract = contract
        self.inputs = InputSlots(contract.inputs)
        self.side_inputs = InputSlots(contract.side_inputs)
        self.outputs = OutputSlots(contract.outputs)

        self.input_timestamp = None
        self.offset = None

    def set_offset(self, offset):
        """
        Promise that every output is emitted at input timestamp + offset (or later).
        """
        if not isinstance(offset, int) or offset < 0:
            raise ValueError(f'Offset must be a non negative int. Got: {offset!r}')
        self.offset = offset

    # === Engine side =================
    def _bind_side_packets(self, values):
        for slot in self.side_inputs:
            slot.packet = Packet(values[slot.entry.name], None)

    def _prepare(self, timestamp, packets):
        self.input_timestamp = timestamp
        for slot in self.inputs:
            slot.packet = packets.get(slot.entry.name)

    def _collect(self):
        res = [(slot.entry, packet) for slot in self.outputs for packet in slot.packets]
        self._reset()
        return res

    def _reset(self):
        for slot in self.outputs:
            slot.packets = []
        for slot in self.inputs:
            slot.packet = None
        self.input_timestamp = None
