import logging
import time
from typing import Any

from lazysupply.lazy_exception import InvalidDataException
from lazysupply.settings import SETTINGS, FloatSetting

logger = logging.getLogger(__name__)


def start() -> float:
    return time.perf_counter()

def check(start_time: float, kind: str, detail: Any, location: str) -> bool:
    run_time = took(start_time)
    setting = SETTINGS.get(kind)
    if not isinstance(setting, FloatSetting):
        return False
    try:
        limit = setting.value
    except InvalidDataException as e:
        logger.error(f'Not checking {kind} for {location}: {e}')
        return False
    if run_time > limit:
        detail_s = detail if isinstance(detail, str) else '\n\n'.join(map(str, list(detail)))
        logger.warning('Exceeded {kind} limit ({run_time} > {limit}) in {location}: {detail_s}'.format(kind=kind, run_time=round(run_time, 1), limit=limit, detail_s=detail_s, location=location))
        return True
    return False

def took(start_time: float) -> float:
    return time.perf_counter() - start_time
