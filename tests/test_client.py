from unittest import mock

import pytest

from sigtalk.client import main, send_message
from sigtalk.protocol import Decoder, encode_message


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, pid, signum):
        self.calls.append((pid, signum))


def test_send_message_sends_every_signal_in_order():
    recorder = _Recorder()
    send_message(321, "hey", delay=0, kill=recorder)
    assert recorder.calls == [(321, s) for s in encode_message("hey")]


def test_send_message_signal_count():
    recorder = _Recorder()
    send_message(5, "abcd", delay=0, kill=recorder)
    assert len(recorder.calls) == 8 * 5


def test_sent_signals_decode_to_message():
    recorder = _Recorder()
    send_message(9, "round trip", delay=0, kill=recorder)
    decoder = Decoder()
    received = bytes(
        b for b in (decoder.feed(s) for _, s in recorder.calls) if b is not None
    )
    assert received == b"round trip\0"


def test_send_message_sleeps_after_each_signal():
    recorder = _Recorder()
    with mock.patch("time.sleep") as sleep:
        send_message(9, "x", delay=0.25, kill=recorder)
    assert sleep.call_count == len(recorder.calls)
    assert all(c.args == (0.25,) for c in sleep.call_args_list)


@pytest.mark.parametrize("argv", [[], ["123"], ["123", "a", "b"]])
def test_main_rejects_wrong_argument_count(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 1
    assert "Usage" in capsys.readouterr().out


def test_main_sends_to_parsed_pid():
    with mock.patch("os.kill") as kill, mock.patch("time.sleep"):
        result = main(["  4242xyz", "ok"])
    assert result == 0
    sent = [c.args for c in kill.call_args_list]
    assert sent == [(4242, s) for s in encode_message("ok")]