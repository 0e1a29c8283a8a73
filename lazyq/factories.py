import typing
from itertools import repeat as itertools_repeat
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Seq

def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """wrap an iterable without copying it"""
    from .sequence import Seq
    return Seq(lambda: data)

def from_range(start: int, count: int) -> 'Seq[int]':
    """count consecutive integers from start"""
    from .sequence import Seq
    return Seq(lambda: range(start, start + count))

def repeat(item: T, count: int) -> 'Seq[T]':
    """the same item, count times"""
    from .sequence import Seq
    return Seq(lambda: itertools_repeat(item, count))

def empty() -> 'Seq[Any]':
    """create empty sequence"""
    from .sequence import Seq
    return Seq(lambda: ())

def generate(generator_func: Callable[[], T], count: int) -> 'Seq[T]':
    """call generator_func lazily, count times"""
    from .sequence import Seq
    return Seq(lambda: (generator_func() for _ in range(count)))

# --- aliases ---
seq = from_iterable
P = from_iterable
p = from_iterable
