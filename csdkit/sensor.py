"""Network sensors with a shared count of open sensors."""

from __future__ import annotations

_MIN_PORT = 1024
_MAX_PORT = 65535


class Sensor:
    """A sensor reachable at a host and port."""

    _count = 0

    def __init__(self, name: str, host: str, port: int, is_open: bool = True) -> None:
        if not 0 <= port <= _MAX_PORT:
            raise ValueError(f"port must be in 0..{_MAX_PORT}, got {port}")
        self.name = name
        self.host = host
        self._port = port
        self._open = is_open
        if is_open:
            Sensor._count += 1

    @classmethod
    def count(cls) -> int:
        """Return the number of open sensors."""
        return Sensor._count

    @classmethod
    def reset_count(cls) -> None:
        """Mark all sensors as closed by resetting the count."""
        print("All open sensors closed")
        Sensor._count = 0

    @property
    def port(self) -> int:
        return self._port

    @port.setter
    def port(self, value: int) -> None:
        self._port = _MIN_PORT if value < _MIN_PORT or value > _MAX_PORT else value

    @property
    def is_open(self) -> bool:
        return self._open

    def set(self, name: str, host: str, port: int) -> None:
        """Change name, host and port together."""
        self.name = name
        self.host = host
        self.port = port

    def open(self) -> None:
        """Announce that the sensor opened and count it."""
        print(f"{self.name} opened")
        Sensor._count += 1

    def close(self) -> None:
        """Announce that the sensor closed and stop counting it."""
        print(f"{self.name} closed")
        Sensor._count -= 1

    def __str__(self) -> str:
        state = "Open" if self._open else "Closed"
        return f"{self.name}, {self.host},{self._port}, {state}"

    def __repr__(self) -> str:
        return f"Sensor({self.name!r}, {self.host!r}, {self._port!r}, {self._open!r})"