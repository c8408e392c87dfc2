"""JSON encoding of registry values, using ORCID's kebab-case vocabulary."""

import json
from typing import Any, Dict, Type, TypeVar

from .. import domain
from ..exceptions import DecodeError
from .schema import LIST, NODE, VALUE, Entity, Field, entity_for

T = TypeVar('T')


def to_json(obj: Any) -> Dict[str, Any]:
    """
    Generate the JSON-ready ``dict`` for a :mod:`moat.domain` value.

    Absent (``None``) fields are left out; lists keep their order;
    :class:`.domain.Value` wrappers become ``{"value": ...}``.

    Raises
    ------
    :class:`.EncodeError`
        If ``obj`` is not a registry model.

    """
    entity = entity_for(type(obj))
    data: Dict[str, Any] = {}
    for field in entity.fields:
        value = getattr(obj, field.name)
        if _absent(field, value):
            continue
        if field.kind == VALUE:
            data[field.key] = {'value': value.value}
        elif field.kind == NODE:
            data[field.key] = to_json(value)
        elif field.kind == LIST:
            data[field.key] = [to_json(item) for item in value]
        else:
            data[field.key] = value
    return data


def dumps(obj: Any) -> bytes:
    """Serialize a registry value to UTF-8 JSON."""
    return json.dumps(to_json(obj)).encode('utf-8')


def from_json(cls: Type[T], data: Any) -> T:
    """
    Instantiate ``cls`` from the output of :func:`to_json`.

    Raises
    ------
    :class:`.DecodeError`
        If a required key is missing or a scalar has the wrong type.

    """
    entity = entity_for(cls)
    if not isinstance(data, dict):
        raise DecodeError(f'Expected an object for {cls.__name__}')
    values: Dict[str, Any] = {}
    for field in entity.fields:
        raw = data.get(field.key)
        if raw is None:
            continue
        if field.kind == VALUE:
            if not isinstance(raw, dict) or 'value' not in raw:
                raise DecodeError(f'{field.key}: expected a value container')
            if raw['value'] is not None:
                values[field.name] = domain.Value(
                    _scalar(field, raw['value'])
                )
        elif field.kind == NODE:
            values[field.name] = from_json(field.type, raw)
        elif field.kind == LIST:
            if not isinstance(raw, list):
                raise DecodeError(f'{field.key}: expected an array')
            values[field.name] = [from_json(field.type, item) for item in raw]
        else:
            values[field.name] = _scalar(field, raw)
    _check_required(entity, values)
    return cls(**values)  # type: ignore


def loads(cls: Type[T], payload: bytes) -> T:
    """Decode a JSON document into an instance of ``cls``."""
    try:
        data = json.loads(payload)
    except ValueError as e:
        raise DecodeError(f'Malformed JSON: {e}') from e
    return from_json(cls, data)


def _absent(field: Field, value: Any) -> bool:
    if value is None:
        return True
    return field.kind == VALUE and value.value is None


def _scalar(field: Field, raw: Any) -> Any:
    # bool is a subclass of int, so it has to be ruled out explicitly.
    if field.type is int and (isinstance(raw, bool)
                              or not isinstance(raw, int)):
        raise DecodeError(f'{field.key}: expected an integer, got {raw!r}')
    if field.type is not int and not isinstance(raw, field.type):
        raise DecodeError(f'{field.key}: expected {field.type.__name__},'
                          f' got {raw!r}')
    return raw


def _check_required(entity: Entity, values: Dict[str, Any]) -> None:
    missing = [name for name in entity.required if name not in values]
    if missing:
        raise DecodeError(f'{entity.cls.__name__} is missing {missing}')
