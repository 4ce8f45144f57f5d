from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from . import env
from .command import Command
from .errors import BuildStepError, CycleError, MissingOutputError
from .utils import *


@dataclass(eq=False)
class Target:
    output: str
    dependencies: list['Target'] = field(default_factory=list)
    command: Optional[Command] = None

    @property
    def is_source(self) -> bool:
        return self.command is None and not self.dependencies

    def __repr__(self) -> str:
        deps = ''.join(f'[{dep.output}]' for dep in self.dependencies)
        return f'{self.__class__.__name__}({self.output}){deps}'


def source(output: str) -> Target:
    return Target(output)


def target(output: str, dependencies: Iterable[Target] = (), command: Optional[Command] = None) -> Target:
    return Target(output, list(dependencies), command)


def build_target(t: Target, definition: Optional[str] = None) -> bool:
    """Bring `t` up to date, dependencies first.

    `definition` is the build tool's own definition source: when it is newer
    than an output that has a command, that output is rebuilt too.

    Shared dependencies are checked again on every path that reaches them.
    Returns whether the command of `t` itself was run.
    """
    return _build(t, definition, [])


def _build(t: Target, definition: Optional[str], visiting: list[Target]) -> bool:
    if any(t is v for v in visiting):
        start = next(i for i, v in enumerate(visiting) if v is t)
        raise CycleError([v.output for v in visiting[start:]] + [t.output])

    mtime = env.file_mtime(t.output)
    needs_rebuild = mtime == 0

    if t.command is not None and definition is not None and env.file_mtime(definition) > mtime:
        env.vprint(f'"{definition}" is newer than "{t.output}"')
        needs_rebuild = True

    visiting.append(t)
    for dep in t.dependencies:
        _build(dep, definition, visiting)
        if env.file_mtime(dep.output) > mtime:
            env.vprint(f'"{dep.output}" is newer than "{t.output}"')
            needs_rebuild = True
    visiting.pop()

    if not needs_rebuild:
        if t.command is not None:
            cprint(f'{t.output} Up to date!!!', Color.GREEN)
        return False

    if t.command is None:
        if mtime == 0:
            raise MissingOutputError(t.output)
        # nothing can regenerate it; the existing content stands
        return False

    if not t.command.run():
        raise BuildStepError(t.output)
    return True
