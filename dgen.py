r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded test data for the lazyq suites: faker-backed records from a schema,
and sorted runs to feed the merge adaptors.
'''

import numpy as np
from faker import Faker
from lazyq import from_iterable, Seq
from typing import Any, Callable, Dict, List, Optional, Tuple


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "choice":
            # index into the options so the native python value comes back
            options = config["from"]
            return options[int(self._rng.integers(len(options)))]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields may reference siblings generated before them
            generated_obj = {}
            for k, v in schema.items():
                generated_obj[k] = self.create(v, {**current_context, **generated_obj})
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Seq:
        """generate count records up front and wrap them"""
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])

    def sorted_runs(self, runs: int, size: Tuple[int, int],
                    key: Callable[[Any], Any]) -> List[List[Any]]:
        """
        generate `runs` lists of records, each sorted by key.
        run lengths are drawn uniformly from the inclusive size range, so empty runs occur when size[0] is 0.
        """
        low, high = size
        result = []
        for _ in range(runs):
            count = int(self._generator.rng.integers(low, high, endpoint=True))
            records = [self._generator.create(self._schema) for _ in range(count)]
            result.append(sorted(records, key=key))
        return result


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def int_runs(runs: int, size: Tuple[int, int], low: int = 0, high: int = 100,
             seed: Optional[int] = None) -> List[List[int]]:
    """sorted lists of python ints, for merges without a key"""
    rng = np.random.default_rng(seed)
    result = []
    for _ in range(runs):
        count = int(rng.integers(size[0], size[1], endpoint=True))
        values = rng.integers(low, high, size=count, endpoint=True)
        result.append(np.sort(values).tolist())
    return result


def is_non_decreasing(values: List[Any], key: Optional[Callable[[Any], Any]] = None) -> bool:
    keys = [key(v) for v in values] if key else list(values)
    return all(not (b < a) for a, b in zip(keys, keys[1:]))


class CountingIterator:
    """wraps an iterable and counts how many elements were pulled from it"""

    def __init__(self, data):
        self._it = iter(data)
        self.pulled = 0

    def __iter__(self):
        return self

    def __next__(self):
        item = next(self._it)
        self.pulled += 1
        return item
