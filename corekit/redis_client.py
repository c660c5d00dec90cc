"""A small Redis client for string keys, with optional Sentinel master discovery."""

from __future__ import annotations

import json
import logging
import socket
import threading
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Protocol, TypeVar

from corekit.redis_errors import ClientClosedError, KeyNotFoundError

T = TypeVar("T")

_log = logging.getLogger("corekit.redis")

_DIAL_TIMEOUT = 5.0
_IO_TIMEOUT = 3.0
_SECOND = timedelta(seconds=1)
_MILLISECOND = timedelta(milliseconds=1)

_HEALTHCHECK_KEY = "__healthcheck__"
_HEALTHCHECK_VALUE = "ok"
_HEALTHCHECK_TTL = timedelta(seconds=10)


class _ReplyError(Exception):
    """An error reply sent by the server."""


class _Connection(Protocol):
    def execute(self, *args: Any) -> Any: ...

    def close(self) -> None: ...


class _CircuitBreaker(Protocol):
    def execute(self, fn: Callable[[], Any]) -> Any: ...


@dataclass
class RedisConfig:
    """Connection settings; a non-empty ``sentinel_master_name`` enables Sentinel."""

    sentinel_master_name: str = ""
    sentinel_addresses: list[str] = field(default_factory=list)
    network: str = ""
    protocol: int = 0
    host: str = ""
    port: int = 0
    client_name: str = ""
    username: str = ""
    password: str = ""
    db: int = 0


def _encode_command(args: tuple[Any, ...]) -> bytes:
    parts = [f"*{len(args)}\r\n".encode()]
    for arg in args:
        data = arg if isinstance(arg, (bytes, bytearray)) else str(arg).encode()
        parts.append(f"${len(data)}\r\n".encode())
        parts.append(bytes(data))
        parts.append(b"\r\n")
    return b"".join(parts)


def _text(value: Any) -> str:
    return value.decode() if isinstance(value, (bytes, bytearray)) else str(value)


class _RespConnection:
    """One socket speaking the Redis serialization protocol (RESP2 and RESP3)."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._reader = sock.makefile("rb")
        self._closed = False

    @classmethod
    def open(cls, network: str, address: Any) -> _RespConnection:
        if network == "unix":
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            sock.settimeout(_DIAL_TIMEOUT)
            try:
                sock.connect(address)
            except OSError:
                sock.close()
                raise
        else:
            sock = socket.create_connection(address, timeout=_DIAL_TIMEOUT)
        sock.settimeout(_IO_TIMEOUT)
        return cls(sock)

    def execute(self, *args: Any) -> Any:
        if self._closed:
            raise ClientClosedError()
        self._sock.sendall(_encode_command(args))
        return self._read_reply()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._reader.close()
        finally:
            self._sock.close()

    def _read_exact(self, size: int) -> bytes:
        data = self._reader.read(size)
        if len(data) != size:
            raise ConnectionError("redis: connection closed by server")
        return data

    def _read_reply(self) -> Any:
        line = self._reader.readline()
        if not line.endswith(b"\r\n"):
            raise ConnectionError("redis: connection closed by server")
        kind, payload = line[:1], line[1:-2]

        if kind == b"+":
            return payload.decode()
        if kind == b"-":
            raise _ReplyError(payload.decode())
        if kind in (b":", b"("):
            return int(payload)
        if kind == b",":
            return float(payload)
        if kind == b"#":
            return payload == b"t"
        if kind == b"_":
            return None
        if kind in (b"$", b"=", b"!"):
            size = int(payload)
            if size < 0:
                return None
            data = self._read_exact(size + 2)[:-2]
            if kind == b"!":
                raise _ReplyError(data.decode())
            return data[4:] if kind == b"=" else data
        if kind in (b"*", b"~", b">"):
            size = int(payload)
            if size < 0:
                return None
            return [self._read_reply() for _ in range(size)]
        if kind == b"%":
            return {self._read_reply(): self._read_reply() for _ in range(int(payload))}
        raise ConnectionError(f"redis: unexpected reply {line!r}")


def _expiry_args(ttl: timedelta) -> list[str]:
    if ttl <= timedelta(0):
        return []
    if ttl < _SECOND or ttl % _SECOND:
        return ["PX", str(max(ttl // _MILLISECOND, 1))]
    return ["EX", str(ttl // _SECOND)]


def _split_address(address: str) -> tuple[str, int]:
    host, _, port = address.rpartition(":")
    return host.strip("[]"), int(port)


class Client:
    """Connects lazily on first use; every call may pass through a circuit breaker."""

    def __init__(
        self,
        config: RedisConfig,
        circuit_breaker: _CircuitBreaker | None = None,
        *,
        connect: Callable[[], _Connection] | None = None,
    ) -> None:
        self.config = config
        self.circuit_breaker = circuit_breaker
        self._connect = connect or self._open_connection
        self._conn: _Connection | None = None
        self._lock = threading.Lock()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _call(self, fn: Callable[[], T]) -> T:
        if self.circuit_breaker is None:
            return fn()
        return self.circuit_breaker.execute(fn)

    def is_connected(self) -> bool:
        """Whether a connection has been established."""
        with self._lock:
            return self._conn is not None

    def close(self) -> None:
        """Close the connection, if one was made; close failures are only logged."""
        with self._lock:
            conn = self._conn
        if conn is None:
            return
        try:
            conn.close()
        except OSError:
            _log.exception("error closing redis client")

    def set_key(self, key: str, value: str, ttl: timedelta) -> None:
        """Store a string value; a positive ``ttl`` sets its expiry."""
        conn = self._ensure_connected()
        _log.debug("setting key %s (ttl %d ms)", key, ttl // _MILLISECOND)
        args = ["SET", key, value, *_expiry_args(ttl)]
        self._call(lambda: conn.execute(*args))

    def get_string(self, key: str) -> str:
        """The string stored at ``key``; raises KeyNotFoundError when absent."""
        conn = self._ensure_connected()
        _log.debug("getting key %s", key)

        def fetch() -> str:
            reply = conn.execute("GET", key)
            if reply is None:
                raise KeyNotFoundError()
            return _text(reply)

        return self._call(fetch)

    def _ensure_connected(self) -> _Connection:
        with self._lock:
            if self._conn is not None:
                return self._conn

            def connect() -> _Connection:
                conn = self._connect()
                try:
                    conn.execute("PING")
                except BaseException:
                    conn.close()
                    raise
                self._conn = conn
                return conn

            return self._call(connect)

    def _open_connection(self) -> _Connection:
        network = self.config.network or "tcp"
        conn = _RespConnection.open(network, self._resolve_address(network))
        try:
            self._handshake(conn)
        except BaseException:
            conn.close()
            raise
        return conn

    def _resolve_address(self, network: str) -> Any:
        cfg = self.config
        if not cfg.sentinel_master_name:
            return cfg.host if network == "unix" else (cfg.host, cfg.port)

        last_error: BaseException | None = None
        for address in cfg.sentinel_addresses:
            try:
                sentinel = _RespConnection.open("tcp", _split_address(address))
            except (OSError, ValueError) as err:
                last_error = err
                continue
            try:
                reply = sentinel.execute("SENTINEL", "get-master-addr-by-name", cfg.sentinel_master_name)
            except (OSError, _ReplyError) as err:
                last_error = err
                continue
            finally:
                sentinel.close()
            if reply:
                host, port = reply
                return _text(host), int(_text(port))
        raise ConnectionError(
            "redis: all sentinels specified in configuration are unreachable"
        ) from last_error

    def _handshake(self, conn: _RespConnection) -> None:
        cfg = self.config
        greeted = False

        if (cfg.protocol or 3) == 3:
            args = ["HELLO", "3"]
            if cfg.password:
                args += ["AUTH", cfg.username or "default", cfg.password]
            if cfg.client_name:
                args += ["SETNAME", cfg.client_name]
            try:
                conn.execute(*args)
                greeted = True
            except _ReplyError:
                greeted = False

        if not greeted:
            if cfg.password:
                auth = ["AUTH", cfg.username, cfg.password] if cfg.username else ["AUTH", cfg.password]
                conn.execute(*auth)
            if cfg.client_name:
                conn.execute("CLIENT", "SETNAME", cfg.client_name)

        if cfg.db > 0:
            conn.execute("SELECT", str(cfg.db))


def set_json(client: Client, key: str, value: Any, ttl: timedelta) -> None:
    """Store ``value`` as JSON at ``key``."""
    client.set_key(key, json.dumps(value, separators=(",", ":")), ttl)


def get_json(client: Client, key: str, default_value: Any) -> Any:
    """Load the JSON stored at ``key``.

    Failures are raised with ``default_value`` attached as ``default_value``.
    """
    try:
        return json.loads(client.get_string(key))
    except Exception as err:
        err.default_value = default_value  # type: ignore[attr-defined]
        raise


class HealthcheckService:
    """Checks a Redis client by writing and reading back a probe key."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def is_ok(self) -> bool:
        """True when unconnected, or when the probe key round-trips."""
        if not self.client.is_connected():
            return True
        try:
            self.client.set_key(_HEALTHCHECK_KEY, _HEALTHCHECK_VALUE, _HEALTHCHECK_TTL)
            value = self.client.get_string(_HEALTHCHECK_KEY)
        except Exception:
            return False
        return value == _HEALTHCHECK_VALUE