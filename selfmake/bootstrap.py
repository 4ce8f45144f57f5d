import contextlib
import os
import sys
from typing import NoReturn, Optional

from . import env
from .command import Command
from .config import Config, default_config
from .errors import BuildError, ExecError, RenameError
from .execute import spawn
from .utils import *


def rebuild_command(source: str, binary: str, config: Optional[Config] = None) -> Command:
    if config is None:
        config = default_config()
    return Command(config.rebuild_tokens(source, binary))


def needs_self_rebuild(source: str, binary: str) -> bool:
    return env.file_mtime(source) > env.file_mtime(binary)


def restart(binary: str, argv: list[str]) -> NoReturn:
    """Replace the running process with `binary`, passing `argv` through unchanged.

    Windows has no in-place image replacement: there the binary runs as a child
    and its exit status becomes ours.
    """
    sys.stdout.flush()
    sys.stderr.flush()

    if os.name == 'nt':
        proc = spawn([binary, *argv[1:]])
        proc.wait()
        sys.exit(proc.returncode)

    try:
        os.execvp(binary, argv)
    except OSError as e:
        raise ExecError(f'failed to restart "{binary}": {e.strerror or e}') from e
    raise ExecError('How did we get here?')


def _restore(backup: str, binary: str) -> None:
    env.vprint(f'restoring "{backup}" to "{binary}"')
    try:
        os.replace(backup, binary)
    except OSError as e:
        eprint(f'restore "{binary}" from "{backup}" failed: {e.strerror or e}')


def go_rebuild_urself(argv: list[str], source: str, binary: Optional[str] = None,
                      command: Optional[Command] = None, config: Optional[Config] = None) -> None:
    """Recompile and re-execute the tool when `source` is newer than `binary`.

    `binary` defaults to `argv[0]`. The rebuild runs `command` if given, otherwise
    the `rebuild` template of `config`. Returns when no rebuild was needed, or
    when the rebuild failed and the previous binary was put back in place.
    """
    if binary is None:
        binary = argv[0]

    if not needs_self_rebuild(source, binary):
        env.vprint(f'"{binary}" is up to date with "{source}"')
        return

    env.iprint('rebuilding')

    if command is None:
        command = rebuild_command(source, binary, config)

    backup = env.backup_path(binary)
    # rename() on Windows refuses to overwrite an existing file
    if os.name == 'nt' and env.file_mtime(backup) != 0:
        with contextlib.suppress(OSError):
            os.remove(backup)

    try:
        os.rename(binary, backup)
    except OSError as e:
        raise RenameError(f'Couldnt rename old binary "{binary}": {e.strerror or e}') from e

    try:
        ok = command.run()
    except BuildError:
        _restore(backup, binary)
        raise
    if not ok:
        _restore(backup, binary)

    with contextlib.suppress(OSError):
        os.unlink(backup)

    if not ok:
        # the restored binary is the image already running and still older
        # than its source: re-executing it would only retry the same rebuild
        eprint(f'rebuilding "{binary}" failed, continuing with the old binary')
        return

    env.iprint(f'Restarting {binary}...')
    restart(binary, argv)
