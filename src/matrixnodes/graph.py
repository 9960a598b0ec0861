from enum import IntEnum

from .context import Context
from .contract import Contract
from .errors import GraphError, InvalidConfiguration, PacketTypeError
from .node_logger import Logger
from .packet import Packet
from .stream import Input_Storage, Poller, Stream
from .tag_map import TagMap


class Graph_State(IntEnum):
    BUILT = 1
    RUNNING = 2
    FAILED = 3
    CLOSED = 4


class Node_Runner():
    """
    Everything the graph needs to drive one node: its config, contract and (once running) instance and context.
    """

    def __init__(self, node_config, node_cls, contract):
        self.config = node_config
        self.node_cls = node_cls
        self.contract = contract
        self.node = None
        self.ctx = None
        self.storage = Input_Storage([e.name for e in contract.inputs])

    def __str__(self):
        return f"{self.config.name} [{self.node_cls.__name__}]"

    def input_ports(self, stream_name):
        return [e.port for e in self.contract.inputs if e.name == stream_name]


class Graph(Logger):
    """
    Validates a GraphConfig and runs it synchronously: every add_packet call returns once
    all packets it triggered have been processed.
    """

    def __init__(self, config, registry=None):
        self.config = config
        super().__init__()

        if registry is None:
            from . import get_registry
            registry = get_registry()
        self.registry = registry

        self.runners = [self._build_runner(nc) for nc in config.nodes]
        self.streams = self._wire()

        self.state = Graph_State.BUILT
        self._error = None
        self.info(f'Built graph with {len(self.runners)} nodes and {len(self.streams)} streams')

    def __str__(self):
        return "Graph"

    # === Build Stuff =================
    def _build_runner(self, node_config):
        node_cls = self.registry.nodes.get_class(node_config.calculator)
        contract = Contract(node_config)
        try:
            node_cls.get_contract(contract)
        except InvalidConfiguration as e:
            raise InvalidConfiguration(f'{node_config.display_name()}: {e}') from e
        contract.check_complete()
        return Node_Runner(node_config, node_cls, contract)

    def _wire(self):
        streams = {}
        for name in TagMap(self.config.input_streams).names():
            if name in streams:
                raise InvalidConfiguration(f'Graph input stream "{name}" declared twice')
            streams[name] = Stream(name)

        for runner in self.runners:
            for entry in runner.contract.outputs:
                if entry.name in streams:
                    raise InvalidConfiguration(f'Stream "{entry.name}" has more than one producer ({runner})')
                streams[entry.name] = Stream(entry.name, port=entry.port, producer=runner)

        side_packets = TagMap(self.config.input_side_packets).names()
        for runner in self.runners:
            for entry in runner.contract.inputs:
                if entry.name not in streams:
                    raise InvalidConfiguration(f'{runner}: input stream "{entry.name}" is neither a graph input nor produced by a node')
                stream = streams[entry.name]
                if stream.port is not None and not type(stream.port).can_input_to(type(entry.port)):
                    raise InvalidConfiguration(f'{runner}: {stream.port} cannot input to {entry.port}')
                if runner not in stream.consumers:
                    stream.consumers.append(runner)

            for entry in runner.contract.side_inputs:
                if entry.name not in side_packets:
                    raise InvalidConfiguration(f'{runner}: input side packet "{entry.name}" is not a graph input side packet')

        for name in TagMap(self.config.output_streams).names():
            if name not in streams:
                raise InvalidConfiguration(f'Graph output stream "{name}" is not produced by any node')

        return streams

    def _get_stream(self, name):
        if name not in self.streams:
            raise GraphError(f'Unknown stream "{name}". Available: {", ".join(self.streams)}')
        return self.streams[name]

    # === Observer Stuff =================
    def observe_output_stream(self, name, callback):
        self._get_stream(name).observers.append(callback)

    def poll_output_stream(self, name):
        return Poller(self._get_stream(name))

    # === Run Stuff =================
    def start_run(self, side_packets=None):
        if self.state != Graph_State.BUILT:
            raise GraphError(f'Can only start a freshly built graph, state is {self.state.name}')
        side_packets = dict(side_packets or {})

        declared = TagMap(self.config.input_side_packets).names()
        missing = [name for name in declared if name not in side_packets]
        if len(missing) > 0:
            raise GraphError(f'Missing input side packets: {", ".join(missing)}')
        unknown = [name for name in side_packets if name not in declared]
        if len(unknown) > 0:
            raise GraphError(f'Unknown input side packets: {", ".join(unknown)}')

        for runner in self.runners:
            for entry in runner.contract.side_inputs:
                valid, msg = entry.port.check_value(side_packets[entry.name])
                if not valid:
                    raise PacketTypeError(f'{runner}: side packet "{entry.name}" ({entry.port}): {msg}')

        self.state = Graph_State.RUNNING
        try:
            for runner in self.runners:
                runner.node = self.registry.nodes.get(runner.config.calculator, name=runner.config.name, **runner.config.options)
                runner.ctx = Context(runner.contract)
                runner.ctx._bind_side_packets(side_packets)
                runner.node.open(runner.ctx)
        except Exception as e:
            self._fail(e)
            raise
        self.info('Started')

    def add_packet(self, stream_name, packet):
        if self.state == Graph_State.FAILED:
            raise GraphError(f'Graph failed earlier: {self._error}') from self._error
        if self.state != Graph_State.RUNNING:
            raise GraphError(f'Graph is not running, state is {self.state.name}')

        stream = self._get_stream(stream_name)
        if stream.producer is not None:
            raise GraphError(f'Stream "{stream_name}" is produced by {stream.producer}, packets can only be added to graph input streams')
        if not isinstance(packet, Packet):
            packet = Packet(*packet)

        try:
            self._propagate(stream, packet)
        except Exception as e:
            self._fail(e)
            raise

    def _propagate(self, stream, packet):
        # every consumer has to accept the value before the stream advances or anyone observes it
        for runner in stream.consumers:
            for port in runner.input_ports(stream.name):
                valid, msg = port.check_value(packet.value)
                if not valid:
                    raise PacketTypeError(f'{runner}: input stream "{stream.name}" ({port}): {msg}')
        stream.add_packet(packet)
        for runner in stream.consumers:
            runner.storage.put(stream.name, packet)
            self._try_process(runner, packet.timestamp)

    def _try_process(self, runner, ctr):
        node, ctx = runner.node, runner.ctx

        ctx._prepare(ctr, runner.storage.get(ctr))
        if not node._should_process(ctx):
            self.verbose('Decided not to process', runner, ctr)
            ctx._reset()
            return

        try:
            node._process(ctx)
        except Exception:
            ctx._reset()
            raise
        outputs = ctx._collect()
        runner.storage.discard_before(ctr + 1)

        for entry, out_packet in outputs:
            if ctx.offset is not None and out_packet.timestamp < ctr + ctx.offset:
                raise GraphError(
                    f'{runner}: emitted timestamp {out_packet.timestamp} on "{entry.name}" is below input timestamp {ctr} + offset {ctx.offset}')
            self._propagate(self.streams[entry.name], out_packet)

    def _fail(self, error):
        self.state = Graph_State.FAILED
        self._error = error
        self.error(f'Graph failed: {error}')

    def has_error(self):
        return self._error is not None

    @property
    def failure(self):
        return self._error

    def close(self):
        if self.state == Graph_State.CLOSED:
            return
        self.info('Closing')
        for runner in self.runners:
            if runner.node is not None:
                runner.node.close(runner.ctx)
        self.state = Graph_State.CLOSED

    # === Display Stuff =================
    def dot_graph(self, transparent_bg=False):
        from graphviz import Digraph

        graph_attr = {"size": "10,10!", "ratio": "fill"}
        if transparent_bg:
            graph_attr["bgcolor"] = "#00000000"
        dot = Digraph(format='png', strict=False, graph_attr=graph_attr)

        for name, stream in self.streams.items():
            if stream.producer is None:
                dot.node(f"in_{name}", name, shape='invtrapezium')
        for name in TagMap(self.config.output_streams).names():
            dot.node(f"out_{name}", name, shape='trapezium')
        for runner in self.runners:
            dot.node(runner.config.name, str(runner), shape='rect', style='rounded')

        for name, stream in self.streams.items():
            src = f"in_{name}" if stream.producer is None else stream.producer.config.name
            for runner in stream.consumers:
                dot.edge(src, runner.config.name, label=name)
        for name in TagMap(self.config.output_streams).names():
            producer = self.streams[name].producer
            src = f"in_{name}" if producer is None else producer.config.name
            dot.edge(src, f"out_{name}", label=name)

        return dot
