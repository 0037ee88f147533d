"""Session channel state."""

from __future__ import annotations

__all__ = ["Channel"]

_UINT32_MAX = 0xFFFFFFFF


def _uint32(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"{name} must fit in 32 unsigned bits")
    return value


class Channel:
    """One channel of a connection, with its window sizes and state flags."""

    def __init__(self, chid: int, win_size: int, packet_size: int) -> None:
        self.id = _uint32(chid, "chid")
        window = _uint32(win_size, "win_size")
        self.local_window_size = window
        self.remote_window_size = window
        self.packet_size = _uint32(packet_size, "packet_size")
        self.eof_received = False
        self.closing = False

    def eof(self) -> None:
        """Record that the peer will send no more data."""
        self.eof_received = True

    def close(self) -> None:
        """Mark the channel to be closed."""
        self.closing = True

    def __repr__(self) -> str:
        return (
            f"Channel(id={self.id}, local_window_size={self.local_window_size}, "
            f"remote_window_size={self.remote_window_size}, "
            f"packet_size={self.packet_size}, eof_received={self.eof_received}, "
            f"closing={self.closing})"
        )