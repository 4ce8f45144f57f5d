import subprocess
from dataclasses import dataclass
from enum import Enum

from . import env
from .errors import SpawnError


class ProcessStatus(Enum):
    SUCCESS = 1
    EXITED = 2
    SIGNALED = 3


@dataclass
class ProcessResult:
    status: ProcessStatus
    # exit code for EXITED, signal number for SIGNALED, 0 for SUCCESS
    code: int

    @property
    def ok(self) -> bool:
        return self.status == ProcessStatus.SUCCESS


def classify(returncode: int) -> ProcessResult:
    if returncode == 0:
        return ProcessResult(ProcessStatus.SUCCESS, 0)
    if returncode < 0:
        return ProcessResult(ProcessStatus.SIGNALED, -returncode)
    return ProcessResult(ProcessStatus.EXITED, returncode)


def spawn(args: list[str]) -> subprocess.Popen[bytes]:
    try:
        return subprocess.Popen(args)
    except OSError as e:
        raise SpawnError(args[0], e.strerror or str(e)) from e


def execute(args: list[str]) -> ProcessResult:
    proc = spawn(args)
    env.vprint(f'spawned pid {proc.pid}')
    proc.wait()
    result = classify(proc.returncode)
    env.vprint(f'pid {proc.pid} finished: {result.status.name.lower()} ({result.code})')
    return result
