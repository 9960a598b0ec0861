from typing import Any, NamedTuple


class Packet(NamedTuple):
    value: Any
    timestamp: int

    def __repr__(self):
        return f"Packet(ts={self.timestamp}, value={type(self.value).__name__})"
