import os
import sys

import pytest

from selfmake import env
from selfmake.command import Command


def python_command(code: str) -> Command:
    return Command([sys.executable, '-c', code])


def write_command(path, text: str = '') -> Command:
    return python_command(f'open({str(path)!r}, "w").write({text!r})')


def set_mtime(path, mtime: float) -> None:
    os.utime(path, (mtime, mtime))


@pytest.fixture(autouse=True)
def quiet():
    env.set_verbose(False)
    yield
    env.set_verbose(False)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path
