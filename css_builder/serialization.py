import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar('T')


def _to_dict(obj: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, '__dict__'):
        return {key: value for key, value in vars(obj).items() if not key.startswith('_')}
    raise TypeError(f'Object of type {type(obj).__name__} is not JSON serializable')


def to_json(obj: Any) -> str:
    """Compact JSON for plain values, dataclasses and simple objects."""
    return json.dumps(obj, default=_to_dict, separators=(',', ':'))


def from_json(cls: type[T], text: str) -> T:
    """Build ``cls`` from a JSON object, passing its values positionally in document order."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f'Expected a JSON object, got {type(data).__name__}')
    return cls(*data.values())
