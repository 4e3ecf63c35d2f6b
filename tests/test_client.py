import signal
from unittest import mock

import pytest

from minitalk.client import (
    ACK_SIGNAL,
    ONE_SIGNAL,
    ZERO_SIGNAL,
    Client,
    byte_bits,
    main,
    message_bits,
)


@pytest.fixture
def restore_signals():
    saved = {s: signal.getsignal(s) for s in (signal.SIGUSR1, signal.SIGUSR2)}
    yield
    for signum, handler in saved.items():
        signal.signal(signum, handler)


def _acking_kill(calls):
    def fake_kill(pid, signum):
        calls.append((pid, signum))
        signal.raise_signal(ACK_SIGNAL)

    return fake_kill


def test_byte_bits_of_letter():
    assert byte_bits(ord("A")) == (0, 0, 1, 0, 0, 0, 0, 0)


def test_byte_bits_of_zero_are_all_zero():
    assert byte_bits(0) == (0,) * 8


def test_byte_bits_sign_bit_for_high_byte():
    assert byte_bits(0x80)[0] == 1
    assert byte_bits(0x80) == byte_bits(-128)


@pytest.mark.parametrize("byte", [0, 1, 2, 65, 100, 127])
def test_byte_bits_drop_lowest_bit(byte):
    bits = byte_bits(byte)
    assert len(bits) == 8
    assert int("".join(map(str, bits)), 2) == byte >> 1


def test_byte_bits_rejects_out_of_range():
    with pytest.raises(ValueError):
        byte_bits(256)
    with pytest.raises(ValueError):
        byte_bits(-129)


def test_byte_bits_rejects_non_integer():
    with pytest.raises(TypeError):
        byte_bits("A")


def test_message_bits_ends_with_nul_byte():
    bits = list(message_bits("hi"))
    assert len(bits) == 24
    assert bits[:8] == list(byte_bits(ord("h")))
    assert bits[8:16] == list(byte_bits(ord("i")))
    assert bits[-8:] == [0] * 8


def test_message_bits_stops_at_embedded_nul():
    assert list(message_bits("ab\0cd")) == list(message_bits("ab"))


def test_message_bits_same_for_str_and_bytes():
    assert list(message_bits("xyz")) == list(message_bits(b"xyz"))


def test_client_rejects_non_positive_pid():
    with pytest.raises(ValueError):
        Client(0)


def test_client_rejects_negative_delay():
    with pytest.raises(ValueError):
        Client(123, delay=-1)


def test_send_signals_each_bit(restore_signals):
    calls = []
    client = Client(4242, delay=0)
    with mock.patch("minitalk.client.os.kill", side_effect=_acking_kill(calls)):
        client.send("ok")
    expected = [ONE_SIGNAL if bit else ZERO_SIGNAL for bit in message_bits("ok")]
    assert [signum for _, signum in calls] == expected
    assert {pid for pid, _ in calls} == {4242}


def test_send_byte_sends_eight_signals(restore_signals):
    calls = []
    client = Client(77, delay=0)
    with mock.patch("minitalk.client.os.kill", side_effect=_acking_kill(calls)):
        client.send_byte(ord("A"))
    expected = [ONE_SIGNAL if bit else ZERO_SIGNAL for bit in byte_bits(ord("A"))]
    assert [signum for _, signum in calls] == expected


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Usage: ./client <server pid> <message>\n"


def test_main_sends_message_to_parsed_pid(restore_signals):
    calls = []
    with mock.patch("minitalk.client.os.kill", side_effect=_acking_kill(calls)):
        assert main(["  +321", "a"]) == 0
    assert {pid for pid, _ in calls} == {321}
    assert len(calls) == len(list(message_bits("a")))