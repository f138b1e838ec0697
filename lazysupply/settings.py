import ast
import json
import logging
import os
from typing import Any, Generic, TypeVar

from lazysupply.lazy_exception import InvalidDataException

SETTINGS: dict[str, 'Setting'] = {}
CONFIG: dict[str, Any] = {}

T = TypeVar('T')

logger = logging.getLogger(__name__)


def load_cfg() -> dict[str, Any]:
    try:
        with open('config.json') as f:
            cfg = json.load(f)
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        raise InvalidDataException(f'config.json is not valid JSON: {e}') from e
    if not isinstance(cfg, dict):
        raise InvalidDataException(f'Expected a JSON object in config.json, got `{cfg}` ({type(cfg)})')
    return cfg

class Setting(Generic[T]):
    def __init__(self, key: str, default_value: T, doc: str | None = None) -> None:
        self.key = key
        self.default_value = default_value
        if doc is not None:
            self.__doc__ = doc
        SETTINGS[key] = self

    def get(self) -> T:
        key = self.key
        if key in CONFIG:
            return CONFIG[key]
        if key in os.environ:
            logger.info(f'CONFIG: {key}={os.environ[key]}')
            return os.environ[key]  # type: ignore
        cfg = load_cfg()
        if key in cfg:
            return cfg[key]
        return self.default_value

    # Overrides are in-process only, config.json is never written.
    def set(self, value: T) -> T:
        CONFIG[self.key] = value
        logger.info(f'CONFIG: {self.key}={value}')
        return value

    def reset(self) -> None:
        CONFIG.pop(self.key, None)


class BoolSetting(Setting[bool]):
    @property
    def value(self) -> bool:
        val = self.get()
        if val is None:
            raise fail(self.key, val, bool)
        if isinstance(val, bool):
            return val
        if isinstance(val, str):
            # required so that we can pass bool-values in environment variables
            if val.lower() in ['true', 'yes', '1']:
                val = 'True'
            if val.lower() in ['false', 'no', '0']:
                val = 'False'
            try:
                val2 = ast.literal_eval(val)
            except (ValueError, SyntaxError) as e:
                raise fail(self.key, val, bool) from e
            if isinstance(val2, bool):
                CONFIG[self.key] = val2
                return CONFIG[self.key]
        raise fail(self.key, val, bool)

    @value.setter
    def value(self, value: bool) -> None:
        self.set(value)


class FloatSetting(Setting[float]):
    @property
    def value(self) -> float:
        val = self.get()
        if isinstance(val, bool) or val is None:
            raise fail(self.key, val, float)
        if isinstance(val, (int, float)):
            return float(val)
        if isinstance(val, str):
            # required so that we can pass float-values in environment variables
            try:
                CONFIG[self.key] = float(val)
            except ValueError as e:
                raise fail(self.key, val, float) from e
            return CONFIG[self.key]
        raise fail(self.key, val, float)

    @value.setter
    def value(self, value: float) -> None:
        self.set(value)

def fail(key: str, val: Any, expected_type: type) -> InvalidDataException:
    return InvalidDataException(f'Expected a {expected_type} for {key}, got `{val}` ({type(val)})')
