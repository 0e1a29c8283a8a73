import logging
from dataclasses import dataclass, asdict, fields, replace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LazyqConfig:
    numpy_sort: bool = True
    numpy_min_size: int = 64

    def __post_init__(self):
        if not isinstance(self.numpy_sort, bool):
            raise ValueError(f"numpy_sort must be a bool, got {self.numpy_sort!r}.")
        # bool is an int subclass but never a meaningful size
        if isinstance(self.numpy_min_size, bool) or not isinstance(self.numpy_min_size, int):
            raise ValueError(f"numpy_min_size must be an int, got {self.numpy_min_size!r}.")
        if self.numpy_min_size < 0:
            raise ValueError("numpy_min_size must be non-negative.")


_active = LazyqConfig()


def get_config() -> LazyqConfig:
    """the configuration currently in effect"""
    return _active


def configure(**options) -> LazyqConfig:
    """replace selected options. unknown option names raise a valueerror."""
    global _active
    known = {f.name for f in fields(LazyqConfig)}
    unknown = sorted(set(options) - known)
    if unknown:
        raise ValueError(f"unknown configuration option(s): {', '.join(unknown)}")

    _active = replace(_active, **options)
    logger.info(f"config: {asdict(_active)}")
    return _active


def reset_config() -> LazyqConfig:
    """restore the default options"""
    global _active
    _active = LazyqConfig()
    return _active
