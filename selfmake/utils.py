import os
import sys
import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import NoReturn, Optional

from .errors import BuildError


__DEFAULT_ERRNO = 1


def sys_exit(msg: Optional[str], err: Optional[int] = None) -> NoReturn:
    global __DEFAULT_ERRNO

    if msg is not None:
        eprint(msg)
    if err is None:
        sys.exit(__DEFAULT_ERRNO)
    else:
        sys.exit(err)


class Color(Enum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHTGRAY = 7


def _use_color(stream) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    isatty = getattr(stream, 'isatty', None)
    return isatty is not None and isatty()


def cprint(s: str, foreground: Optional[Color]=None, background: Optional[Color]=None, *, file=None) -> None:
    stream = sys.stdout if file is None else file
    formats : list[str] = []
    if foreground is not None:
        formats.append(str(foreground.value + 30))
    if background is not None:
        formats.append(str(background.value + 40))

    format = ';'.join(formats)
    if format and _use_color(stream):
        print(f'\033[{format}m{s}\033[0m', file=stream, flush=True)
    else:
        print(s, file=stream, flush=True)


def eprint(s: str) -> None:
    cprint(s, Color.RED, file=sys.stderr)


def _raise_site(e: BaseException) -> tuple[str, int]:
    frames = traceback.extract_tb(e.__traceback__)
    if not frames:
        return '<unknown>', 0
    frame = frames[-1]
    return os.path.relpath(frame.filename), frame.lineno or 0


def panic(e: BaseException) -> NoReturn:
    path, lineno = _raise_site(e)
    message = str(e) or e.__class__.__name__
    sys_exit(f'Panic at {path}:{lineno}: \n>>> {message}')


@contextmanager
def fatal_errors() -> Iterator[None]:
    # the one place where a fatal build error turns into a process exit
    try:
        yield
    except (BuildError, MemoryError) as e:
        panic(e)
