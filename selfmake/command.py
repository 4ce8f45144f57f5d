from collections.abc import Iterable, Iterator
from typing import Optional

from .errors import SignalError
from .execute import ProcessStatus, execute
from .utils import *


def _quote(token: str) -> str:
    if ' ' in token:
        return f"'{token}'"
    return token


class Command:
    """An ordered list of tokens: the program to invoke followed by its arguments.

    A command may be run any number of times; an empty one never spawns anything.
    """

    def __init__(self, tokens: Optional[Iterable[str]] = None) -> None:
        self._tokens : list[str] = [] if tokens is None else list(tokens)

    @property
    def tokens(self) -> list[str]:
        return self._tokens

    def append(self, *tokens: str) -> 'Command':
        self._tokens.extend(tokens)
        return self

    def remove(self, index: int) -> str:
        return self._tokens.pop(index)

    def copy(self) -> 'Command':
        return Command(self._tokens)

    def render(self) -> str:
        return ' '.join(_quote(token) for token in self._tokens)

    def print(self) -> None:
        if not self._tokens:
            return
        print(self.render(), flush=True)

    def run(self) -> bool:
        if not self._tokens:
            return False

        cprint(f'[CMD] {self.render()}', Color.GREEN)

        result = execute(self._tokens)
        if result.ok:
            return True
        match result.status:
            case ProcessStatus.EXITED:
                eprint(f'Command failed with exit code {result.code}')
                return False
            case ProcessStatus.SIGNALED:
                raise SignalError(result.code)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self._tokens == other._tokens

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._tokens!r})'


def cmd(*tokens: str) -> Command:
    return Command(tokens)
