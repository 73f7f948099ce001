"""A small TCP chat: one server broadcasts to many clients.

Every message on the wire is framed as a single length byte followed by
that many bytes of UTF-8 text.
"""

from __future__ import annotations

import queue
import socket
import sys
import threading
from typing import Optional, Union

ENCODING = "utf-8"
MAX_MESSAGE = 255
BACKLOG = 100
_ACCEPT_POLL = 0.2
_JOIN_TIMEOUT = 2.0

_console = threading.Lock()


def frame_message(text: str) -> bytes:
    """Encode text as one length-prefixed frame."""
    payload = text.encode(ENCODING)
    if not payload:
        raise ValueError("cannot frame an empty message")
    if len(payload) > MAX_MESSAGE:
        raise ValueError(
            f"message is {len(payload)} bytes, the limit is {MAX_MESSAGE}"
        )
    return bytes([len(payload)]) + payload


class MessageAssembler:
    """Collects received bytes and yields each message once it is complete."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet part of a complete message."""
        return len(self._buffer)

    def feed(self, data: bytes) -> list[str]:
        """Add received bytes and return the messages they complete, in order."""
        self._buffer += data
        messages: list[str] = []
        while self._buffer:
            length = self._buffer[0]
            if len(self._buffer) < length + 1:
                break
            payload = bytes(self._buffer[1 : length + 1])
            del self._buffer[: length + 1]
            messages.append(payload.decode(ENCODING, errors="replace"))
        return messages


def _close_socket(sock: socket.socket) -> None:
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass
    sock.close()


class ChatServer:
    """Accepts clients, collects their messages and broadcasts to all of them.

    Received messages arrive on ``messages`` as ``(ip, text)`` pairs;
    connection notices arrive on ``events`` as text lines.
    """

    def __init__(self, port: int, host: str = "") -> None:
        self.host = host
        self.port = port
        self.messages: queue.Queue[tuple[str, str]] = queue.Queue()
        self.events: queue.Queue[str] = queue.Queue()
        self._sock: Optional[socket.socket] = None
        self._clients: dict[socket.socket, tuple[str, int]] = {}
        self._lock = threading.Lock()
        self._running = threading.Event()
        self._accept_thread: Optional[threading.Thread] = None
        self._receivers: list[threading.Thread] = []

    def __enter__(self) -> ChatServer:
        if not self._running.is_set():
            self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def start(self) -> None:
        """Bind, listen and begin accepting clients in the background."""
        if self._running.is_set():
            raise RuntimeError("server is already running")
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
            sock.listen(BACKLOG)
            sock.settimeout(_ACCEPT_POLL)
        except OSError:
            sock.close()
            raise
        self._sock = sock
        self.port = sock.getsockname()[1]
        self._running.set()
        self._accept_thread = threading.Thread(
            target=self._accept_loop, name="chat-accept", daemon=True
        )
        self._accept_thread.start()

    def _accept_loop(self) -> None:
        sock = self._sock
        assert sock is not None
        while self._running.is_set():
            try:
                conn, address = sock.accept()
            except socket.timeout:
                continue
            except OSError:
                if not self._running.is_set():
                    break
                continue
            conn.settimeout(None)
            receiver = threading.Thread(
                target=self._receive, args=(conn, address), name="chat-receive", daemon=True
            )
            with self._lock:
                self._clients[conn] = address
                self._receivers.append(receiver)
            receiver.start()
            self.events.put(f"New client connected: {address[0]}")

    def _receive(self, conn: socket.socket, address: tuple[str, int]) -> None:
        assembler = MessageAssembler()
        try:
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                for text in assembler.feed(data):
                    self.messages.put((address[0], text))
        except OSError:
            pass
        finally:
            self._drop(conn)

    def _drop(self, conn: socket.socket) -> None:
        with self._lock:
            address = self._clients.pop(conn, None)
        if address is None:
            return
        _close_socket(conn)
        self.events.put(f"Client disconnected: {address[0]}")

    def clients(self) -> list[str]:
        """IP addresses of the connected clients, oldest connection first."""
        with self._lock:
            return [address[0] for address in self._clients.values()]

    def broadcast(self, text: str) -> None:
        """Send text to every connected client; an empty text sends nothing."""
        if not text:
            return
        frame = frame_message(text)
        with self._lock:
            connections = list(self._clients)
        for conn in connections:
            try:
                conn.sendall(frame)
            except OSError:
                self._drop(conn)

    def close(self) -> None:
        """Stop accepting, disconnect every client and release the socket."""
        self._running.clear()
        if self._accept_thread is not None:
            self._accept_thread.join(_JOIN_TIMEOUT)
            self._accept_thread = None
        with self._lock:
            connections = list(self._clients)
        for conn in connections:
            self._drop(conn)
        with self._lock:
            receivers, self._receivers = self._receivers, []
        for receiver in receivers:
            receiver.join(_JOIN_TIMEOUT)
        if self._sock is not None:
            self._sock.close()
            self._sock = None


class ChatClient:
    """A connection to a chat server; received messages arrive on ``messages``."""

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port
        self.messages: queue.Queue[str] = queue.Queue()
        self.disconnected = threading.Event()
        self._sock = socket.create_connection((host, port))
        self._receiver = threading.Thread(
            target=self._receive, name="chat-client-receive", daemon=True
        )
        self._receiver.start()

    def __enter__(self) -> ChatClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _receive(self) -> None:
        assembler = MessageAssembler()
        try:
            while True:
                data = self._sock.recv(4096)
                if not data:
                    break
                for text in assembler.feed(data):
                    self.messages.put(text)
        except OSError:
            pass
        finally:
            self.disconnected.set()

    def send(self, text: str) -> None:
        """Send text to the server; an empty text sends nothing."""
        if not text:
            return
        self._sock.sendall(frame_message(text))

    def close(self) -> None:
        """Close the connection and wait for the receiver to finish."""
        _close_socket(self._sock)
        self._receiver.join(_JOIN_TIMEOUT)


_Node = Union[ChatServer, ChatClient]


def _say(line: str) -> None:
    with _console:
        print(line, flush=True)


def _parse_port(text: str) -> int:
    port = int(text)
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    return port


def _ask_int(accept: set[int] | None = None) -> int:
    while True:
        line = input("> ").strip()
        if not line[:1].isdigit():
            continue
        try:
            value = int(line.split()[0])
        except ValueError:
            continue
        if value == 0:
            continue
        if accept is None or value in accept:
            return value


def _endpoint_from_prompt() -> tuple[str, str, int]:
    print("1. For server  2. For client")
    choice = _ask_int({1, 2})
    if choice == 1:
        print("Type port")
        return "server", "", _parse_port(str(_ask_int()))
    print("Type IP")
    host = input("> ").strip()
    print("Type port")
    return "client", host, _parse_port(str(_ask_int()))


def _endpoint_from_args(args: list[str]) -> tuple[str, str, int]:
    if len(args) == 2 and args[0] == "server":
        return "server", "", _parse_port(args[1])
    if len(args) == 3 and args[0] == "client":
        return "client", args[1], _parse_port(args[2])
    raise ValueError("usage: server PORT | client HOST PORT")


def _print_incoming(node: _Node, stop: threading.Event) -> None:
    while not stop.is_set():
        if isinstance(node, ChatServer):
            while True:
                try:
                    _say(node.events.get_nowait())
                except queue.Empty:
                    break
            try:
                ip, text = node.messages.get(timeout=0.1)
            except queue.Empty:
                continue
            _say(f"Message from {ip} - {text}")
        else:
            try:
                text = node.messages.get(timeout=0.1)
            except queue.Empty:
                continue
            _say(f"Message from server - {text}")


def _command_loop(node: _Node) -> None:
    for raw in sys.stdin:
        line = raw.rstrip("\n")
        if line.startswith("exit"):
            return
        if line.startswith("send "):
            text = line[len("send ") :]
            try:
                if isinstance(node, ChatServer):
                    node.broadcast(text)
                else:
                    node.send(text)
            except ValueError as exc:
                _say(f"Error: {exc}")
            except OSError as exc:
                _say(f"Error: send failed: {exc}")
        elif line.startswith("enum") and isinstance(node, ChatServer):
            addresses = node.clients()
            with _console:
                for ip in addresses:
                    print(ip)
                print(f"Total: {len(addresses)}", flush=True)


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        kind, host, port = _endpoint_from_args(args) if args else _endpoint_from_prompt()
    except EOFError:
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    node: _Node
    try:
        if kind == "server":
            server = ChatServer(port)
            server.start()
            node = server
            _say(f"Listening on port {server.port}")
        else:
            node = ChatClient(host, port)
            _say("Successfully connected")
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    stop = threading.Event()
    printer = threading.Thread(target=_print_incoming, args=(node, stop), daemon=True)
    printer.start()
    try:
        _command_loop(node)
    finally:
        stop.set()
        printer.join(_JOIN_TIMEOUT)
        node.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())