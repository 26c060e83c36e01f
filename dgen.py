"""
seeded fake-record generator for the lazyq test-suite.

a schema is a dict of field -> spec, where spec is one of:
  'word'                                 a faker provider name
  ('pyint', {'min_value': 1, ...})       a faker provider with arguments
  {'_qen_provider': 'choice', 'from': [...]}
  {'_qen_provider': 'ref', 'key': 'id', 'format': 'user-{}'}
  {'_qen_provider': 'literal', 'value': ...}
  [{'_qen_items': {...}, '_qen_count': 3}]   a nested list of records
anything else is taken literally.
"""
import numpy as np
from faker import Faker
from lazyq import from_iterable, Enumerable
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # index into the options so python values come back, not numpy scalars
            options = config["from"]
            return options[int(self._rng.integers(len(options)))]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            value = context[key]
            return config["format"].format(value) if "format" in config else value
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, context)
            record = {}
            for field, spec in schema.items():
                # fields may refer to their parents and to earlier siblings
                record[field] = self.create(spec, {**context, **record})
            return record

        if isinstance(schema, list):
            if not schema:
                return []
            item_schema = schema[0]
            count = item_schema.get("_qen_count", 5) if isinstance(item_schema, dict) else 5
            if isinstance(count, (list, tuple)):
                count = int(self._rng.integers(count[0], count[1], endpoint=True))
            actual = item_schema.get("_qen_items", item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual, context) for _ in range(count)]

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._call_faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
