from enum import IntEnum
import traceback

from .errors import NodeStateError
from .node_logger import Logger


class State(IntEnum):
    UNCONFIGURED = 1
    READY = 2
    CLOSED = 3


class Node(Logger):
    """
    Base class of all nodes.

    Subclasses declare their ports in get_contract and implement process.
    The engine drives the lifecycle: open -> process (any number of times) -> close.
    """

    # === Basic Stuff =================
    def __init__(self, name="Name", **kwargs):
        self.name = name
        super().__init__(**kwargs)
        self.state = State.UNCONFIGURED

    def __repr__(self):
        return str(self)

    def __str__(self):
        return f"{self.name} [{self.__class__.__name__}]"

    def __hash__(self) -> int:
        return id(self)

    # === Contract Stuff =================
    @classmethod
    def get_contract(cls, cc):
        """
        Called while the graph is built, before any instance exists.
        Validate the configured ports and set their types, raise InvalidConfiguration otherwise.
        """
        raise NotImplementedError()

    # === Lifecycle Stuff =================
    def open(self, ctx):
        if self.state != State.UNCONFIGURED:
            raise NodeStateError(f'{str(self)}: open called in state {self.state.name}')
        self.info('Opening')
        self._onopen(ctx)
        self.state = State.READY

    def _process(self, ctx):
        """
        called by the engine once all inputs required for ctx.input_timestamp are available
        """
        if self.state != State.READY:
            raise NodeStateError(f'{str(self)}: process called in state {self.state.name}')
        self.verbose('Processing', ctx.input_timestamp)
        try:
            self.process(ctx)
        except Exception:
            self.error(f'failed to process timestamp {ctx.input_timestamp}')
            self.debug(traceback.format_exc())
            raise
        self.verbose('process fn finished')

    def close(self, ctx):
        if self.state == State.CLOSED:
            return
        self.info('Closing')
        try:
            self._onclose(ctx)
        finally:
            self.state = State.CLOSED

    # === Data Stuff =================
    def _emit_data(self, ctx, data, channel=None, ctr=None):
        """
        Called in process.
        Adds data to an output, per default the first output at the current input timestamp.
        """
        if channel is None:
            channel = 0
        slot = ctx.outputs[channel] if isinstance(channel, int) else ctx.outputs.tag(channel)
        timestamp = ctx.input_timestamp if ctr is None else ctr
        self.verbose('Emitting', slot, timestamp)
        slot.add(data, timestamp)

    def _should_process(self, ctx):
        """
        Given the current inputs, this determines if process should be called or not.
        Per default every input stream must carry a packet.
        """
        return all(not slot.is_empty() for slot in ctx.inputs)

    # === Node Specific Stuff =================
    def process(self, ctx):
        """
        Heart of the node: read from ctx.inputs / ctx.side_inputs and emit via _emit_data.
        Should not keep state between calls apart from what was decided in _onopen.
        """
        raise NotImplementedError()

    def _onopen(self, ctx):
        """
        executed once before the first process call
        """
        pass

    def _onclose(self, ctx):
        """
        executed on close
        """
        pass
