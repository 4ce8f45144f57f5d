import os

from .utils import *


LOCAL_CONFIG_NAME = '.self-make.toml'
GLOBAL_CONFIG_PATH = '/etc/self-make/self-make.toml'
USER_CONFIG_PATH = os.path.expanduser('~/.config/self-make/self-make.toml')

BACKUP_SUFFIX = '.old'


__verbose = False

def set_verbose(verbose: bool) -> None:
    global __verbose
    __verbose = verbose


def vprint(*args: object) -> None:
    if not __verbose:
        return
    output = ' '.join(map(str, args))
    cprint(f'[INFO] {output}', Color.LIGHTGRAY)


def iprint(*args: object) -> None:
    output = ' '.join(map(str, args))
    cprint(f'[INFO] {output}', Color.CYAN)


# A missing or unreadable path is infinitely old: 0 forces a rebuild decision.
def file_mtime(path: str) -> float:
    try:
        return os.stat(path).st_mtime
    except OSError:
        return 0


def backup_path(binary: str) -> str:
    return f'{binary}{BACKUP_SUFFIX}'
