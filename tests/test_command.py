import os
import sys

import pytest

from selfmake import command as command_module
from selfmake.command import Command, cmd
from selfmake.errors import SignalError, SpawnError

from conftest import python_command, write_command


def test_render_quotes_tokens_with_spaces():
    c = cmd('gcc', '-o', 'out file', 'main.c')
    assert c.render() == "gcc -o 'out file' main.c"


def test_render_empty():
    assert Command().render() == ''


def test_print(capsys):
    cmd('gcc', '-c', 'main.c').print()
    assert capsys.readouterr().out == 'gcc -c main.c\n'


def test_print_empty_writes_nothing(capsys):
    Command().print()
    assert capsys.readouterr().out == ''


def test_append_keeps_order():
    c = Command()
    c.append('cc').append('-o', 'main', 'main.c')
    assert c.tokens == ['cc', '-o', 'main', 'main.c']
    assert len(c) == 4
    assert list(c) == c.tokens


def test_append_grows_past_initial_capacity():
    c = Command()
    for i in range(100):
        c.append(str(i))
    assert c.tokens == [str(i) for i in range(100)]


def test_remove():
    c = cmd('cc', '-g', 'main.c')
    assert c.remove(1) == '-g'
    assert c == cmd('cc', 'main.c')
    with pytest.raises(IndexError):
        c.remove(5)


def test_copy_is_independent():
    c = cmd('cc')
    d = c.copy()
    d.append('main.c')
    assert c.tokens == ['cc']
    assert d.tokens == ['cc', 'main.c']


def test_run_empty_spawns_nothing(monkeypatch, capsys):
    def fail(args):
        raise AssertionError('spawned')
    monkeypatch.setattr(command_module, 'execute', fail)
    assert Command().run() is False
    assert capsys.readouterr().out == ''


def test_run_success(tmp_path, capsys):
    out = tmp_path / 'out.txt'
    c = write_command(out, 'hello')
    assert c.run() is True
    assert out.read_text() == 'hello'
    assert capsys.readouterr().out == f'[CMD] {c.render()}\n'


def test_run_can_be_repeated(tmp_path):
    c = python_command('pass')
    assert c.run() is True
    assert c.run() is True


def test_run_nonzero_exit(capsys):
    c = python_command('raise SystemExit(3)')
    assert c.run() is False
    assert 'Command failed with exit code 3' in capsys.readouterr().err


def test_run_missing_program():
    with pytest.raises(SpawnError) as info:
        cmd('self-make-no-such-program').run()
    assert info.value.program == 'self-make-no-such-program'


@pytest.mark.skipif(os.name == 'nt', reason='no signals on Windows')
def test_run_killed_by_signal():
    c = python_command('import os, signal; os.kill(os.getpid(), signal.SIGKILL)')
    with pytest.raises(SignalError) as info:
        c.run()
    assert info.value.signum == 9
    assert 'signal 9' in str(info.value)
