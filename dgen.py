'''
schema-driven fake records for the test suites.

a schema is a dict of field -> rule, where a rule is one of:
  'word'                                   a faker provider name
  ('pyint', {'min_value': 1})              a faker provider with kwargs
  {'_qen_provider': 'choice', 'from': [..]} a random pick
  {'_qen_provider': 'ref', 'key': 'name'}  a field generated earlier
  {'_qen_provider': 'literal', 'value': x} x as is
anything else is returned unchanged.
'''

import logging
import numpy as np
from faker import Faker
from slices import from_iterable, Slice
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # numpy hands back numpy scalars; tests compare against plain python values
            picked = self._rng.choice(config["from"])
            return picked.item() if hasattr(picked, 'item') else picked
        if provider == "ref":
            if config["key"] not in context:
                raise ValueError(f"reference to '{config['key']}' not found in current context.")
            return context[config["key"]]
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._provider(schema, context)
            record = {}
            for key, rule in schema.items():
                # later fields may refer to earlier ones
                record[key] = self.create(rule, {**context, **record})
            return record

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Slice:
        logger.debug("generating %d records", count)
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
