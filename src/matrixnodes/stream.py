from collections import deque
import numbers

from .errors import GraphError, PacketTypeError


class Stream():
    """
    A named edge of the graph. Produced by exactly one node output (or the graph itself) and consumed by any number of node inputs.
    """

    def __init__(self, name, port=None, producer=None):
        self.name = name
        # None for graph input streams, the consumers' ports decide then
        self.port = port
        self.producer = producer
        self.consumers = []
        self.observers = []

        # next allowed timestamp
        self.timestamp_bound = None

    def __repr__(self):
        producer = 'graph' if self.producer is None else str(self.producer)
        return f"<Stream: {self.name} ({producer} -> {len(self.consumers)} consumers)>"

    def check_packet(self, packet):
        if not isinstance(packet.timestamp, numbers.Integral):
            raise GraphError(f'Stream "{self.name}": timestamps must be int. Got: {packet.timestamp!r}')
        if self.timestamp_bound is not None and packet.timestamp < self.timestamp_bound:
            raise GraphError(
                f'Stream "{self.name}": timestamps must be strictly increasing. Got {packet.timestamp}, expected at least {self.timestamp_bound}')
        if self.port is not None:
            valid, msg = self.port.check_value(packet.value)
            if not valid:
                raise PacketTypeError(f'Stream "{self.name}" ({self.port}): {msg}')

    def add_packet(self, packet):
        self.check_packet(packet)
        self.timestamp_bound = int(packet.timestamp) + 1
        for cb in self.observers:
            cb(packet)


class Poller():
    """
    Collects all packets of one stream until they are retrieved.
    """

    def __init__(self, stream):
        self.stream = stream
        self.queue = deque()
        stream.observers.append(self.queue.append)

    def __len__(self):
        return len(self.queue)

    def get_all(self):
        res = []
        while len(self.queue) > 0:
            res.append(self.queue.popleft())
        return res


class Input_Storage():
    """
    Buffers the packets a node received per stream until all inputs for a timestamp are present.
    """

    def __init__(self, stream_names):
        self._read = {name: {} for name in stream_names}

    def put(self, stream_name, packet):
        self._read[stream_name][packet.timestamp] = packet

    def get(self, ctr):
        res = {}
        for name, packets in self._read.items():
            if ctr in packets:
                res[name] = packets[ctr]
        return res

    def discard_before(self, ctr):
        for name, packets in self._read.items():
            self._read[name] = {
                key: val
                for key, val in packets.items() if key >= ctr
            }
