import functools
import logging
import time
import typing as tp

Describe = tp.Callable[..., str]


class log_time:
    """Log how long a table read or write took, and whether it failed.

    Works as a decorator, where ``describe`` builds the message from the
    call arguments, or as a context manager around a described block.
    """

    def __init__(self, logger: logging.Logger, describe: tp.Union[Describe, str, None] = None,
                 level: int = logging.DEBUG) -> None:
        self._logger = logger
        self._describe = describe
        self._level = level
        self._started_at = None

    def __call__(self, fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            what = f'{fn.__module__}.{fn.__qualname__}({self._describe_call(*args, **kwargs)})'
            with log_time(self._logger, what, self._level):
                return fn(*args, **kwargs)

        return wrapper

    def __enter__(self) -> 'log_time':
        self._started_at = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        assert self._started_at is not None, 'log_time entered without being started'
        duration = time.perf_counter() - self._started_at
        if exc_type is None:
            self._logger.log(self._level, '%s took %.3fs', self._describe, duration)
        else:
            self._logger.log(self._level, '%s failed after %.3fs: %s', self._describe, duration, exc_type.__name__)

    def _describe_call(self, *args, **kwargs) -> str:
        if self._describe is None:
            return ''
        if isinstance(self._describe, str):
            return self._describe
        return self._describe(*args, **kwargs)
