import os
import tomllib
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from . import env
from .errors import ConfigError


DEFAULT_REBUILD = ['{cc}', '{source}', '-o', '{binary}']


@dataclass
class Config:
    cc: str
    rebuild: list[str] = field(default_factory=lambda: DEFAULT_REBUILD.copy())
    verbose: bool = False

    def rebuild_tokens(self, source: str, binary: str) -> list[str]:
        values = {'cc': self.cc, 'source': source, 'binary': binary}
        try:
            return [token.format(**values) for token in self.rebuild]
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            raise ConfigError(f'bad placeholder in rebuild command {self.rebuild}: {e}') from e


def default_config() -> Config:
    return Config('gcc')


def _expect_type(path: str, key: str, value: Any, kind: type) -> None:
    if not isinstance(value, kind):
        raise ConfigError(f'parse config "{path}" failed, "{key}" must be of type {kind.__name__}')


def load_config(path: str, *, nonexist_ok: bool=False, base: Optional[Config]=None) -> Config:
    env.vprint(f'loading config from "{path}"')

    # keys missing from this file keep the values of the layer below
    config = default_config() if base is None else replace(base, rebuild=base.rebuild.copy())

    if nonexist_ok and not os.path.exists(path):
        return config

    try:
        with open(path, 'rb') as fp:
            content = tomllib.load(fp)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f'load config "{path}" failed: {e}') from e

    if 'cc' in content:
        _expect_type(path, 'cc', content['cc'], str)
        config.cc = content['cc']
    if 'rebuild' in content:
        rebuild = content['rebuild']
        _expect_type(path, 'rebuild', rebuild, list)
        if not rebuild or not all(isinstance(token, str) for token in rebuild):
            raise ConfigError(f'parse config "{path}" failed, "rebuild" must be a non-empty list of strings')
        config.rebuild = rebuild
    if 'verbose' in content:
        _expect_type(path, 'verbose', content['verbose'], bool)
        config.verbose = content['verbose']

    return config


def global_config() -> Config:
    config = default_config()
    for path in [env.GLOBAL_CONFIG_PATH, env.USER_CONFIG_PATH, env.LOCAL_CONFIG_NAME]:
        config = load_config(path, nonexist_ok=True, base=config)
    return config
