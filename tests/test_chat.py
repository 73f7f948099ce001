import io
import time
from unittest import mock

import pytest

from oddments.chat import (
    MAX_MESSAGE,
    ChatClient,
    ChatServer,
    MessageAssembler,
    frame_message,
    main,
)

LOCALHOST = "127.0.0.1"


def wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()


@pytest.fixture
def server():
    srv = ChatServer(0, LOCALHOST)
    srv.start()
    yield srv
    srv.close()


def test_frame_prefixes_length_byte():
    assert frame_message("hi") == b"\x02hi"


def test_frame_counts_encoded_bytes():
    frame = frame_message("é")
    assert frame[0] == len("é".encode("utf-8"))
    assert frame[1:] == "é".encode("utf-8")


def test_frame_accepts_maximum_length():
    frame = frame_message("x" * MAX_MESSAGE)
    assert frame[0] == MAX_MESSAGE
    assert len(frame) == MAX_MESSAGE + 1


def test_frame_rejects_empty_message():
    with pytest.raises(ValueError):
        frame_message("")


def test_frame_rejects_too_long_message():
    with pytest.raises(ValueError):
        frame_message("x" * (MAX_MESSAGE + 1))


def test_assembler_round_trip():
    assembler = MessageAssembler()
    assert assembler.feed(frame_message("hello there")) == ["hello there"]
    assert assembler.pending == 0


def test_assembler_waits_for_fragments():
    frame = frame_message("fragmented")
    assembler = MessageAssembler()
    assert assembler.feed(frame[:1]) == []
    assert assembler.feed(frame[1:4]) == []
    assert assembler.pending == 4
    assert assembler.feed(frame[4:]) == ["fragmented"]
    assert assembler.pending == 0


def test_assembler_splits_several_frames_in_one_chunk():
    data = frame_message("one") + frame_message("two") + frame_message("three")[:3]
    assembler = MessageAssembler()
    assert assembler.feed(data) == ["one", "two"]
    assert assembler.feed(frame_message("three")[3:]) == ["three"]


def test_client_message_reaches_server(server):
    with ChatClient(LOCALHOST, server.port) as client:
        assert wait_until(lambda: server.clients() == [LOCALHOST])
        client.send("hello")
        assert server.messages.get(timeout=5) == (LOCALHOST, "hello")


def test_server_reports_new_connection(server):
    with ChatClient(LOCALHOST, server.port):
        assert server.events.get(timeout=5) == f"New client connected: {LOCALHOST}"


def test_broadcast_reaches_every_client(server):
    with ChatClient(LOCALHOST, server.port) as first, ChatClient(
        LOCALHOST, server.port
    ) as second:
        assert wait_until(lambda: len(server.clients()) == 2)
        server.broadcast("news")
        assert first.messages.get(timeout=5) == "news"
        assert second.messages.get(timeout=5) == "news"


def test_empty_send_and_broadcast_send_nothing(server):
    with ChatClient(LOCALHOST, server.port) as client:
        assert wait_until(lambda: len(server.clients()) == 1)
        client.send("")
        server.broadcast("")
        client.send("after")
        server.broadcast("back")
        assert server.messages.get(timeout=5) == (LOCALHOST, "after")
        assert client.messages.get(timeout=5) == "back"


def test_disconnected_client_is_removed(server):
    client = ChatClient(LOCALHOST, server.port)
    wait_until(lambda: len(server.clients()) == 1)
    assert server.clients() == [LOCALHOST]
    client.close()
    wait_until(lambda: server.clients() == [])
    assert server.clients() == []


def test_server_close_disconnects_clients():
    srv = ChatServer(0, LOCALHOST)
    srv.start()
    client = ChatClient(LOCALHOST, srv.port)
    try:
        assert wait_until(lambda: len(srv.clients()) == 1)
        srv.close()
        assert client.disconnected.wait(5)
        assert srv.clients() == []
    finally:
        client.close()


def test_start_twice_is_an_error(server):
    with pytest.raises(RuntimeError):
        server.start()


def test_main_client_sends_commands(server):
    with mock.patch("sys.stdin", io.StringIO("send hello\nexit\n")):
        status = main(["client", LOCALHOST, str(server.port)])
    assert status == 0
    assert server.messages.get(timeout=5) == (LOCALHOST, "hello")


def test_main_rejects_unknown_mode():
    assert main(["neither", "1"]) == 2


def test_main_rejects_bad_port():
    assert main(["server", "70000"]) == 2