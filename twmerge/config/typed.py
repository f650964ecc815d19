from __future__ import annotations

import dataclasses
import typing as t
from dataclasses import fields

from ..errors import TWUserError


class ConfigCoerceError(TWUserError, TypeError):
    """Config value does not fit the declared field type; carries the field path."""
    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        prefix = f"{'.'.join(path)}: " if path else ""
        super().__init__(prefix + message)


_T = t.TypeVar("_T")


def build_typed(cls: type[_T], data: t.Any) -> _T:
    """
    Build a dataclass instance from plain YAML data, coercing nested values
    according to the class's type hints.
    """
    try:
        return t.cast(_T, _coerce_to_class(cls, data, path=()))
    except ConfigCoerceError:
        raise
    except Exception as e:
        raise ConfigCoerceError(f"failed to build {getattr(cls, '__name__', str(cls))}: {e}") from e


def _coerce_to_class(cls: type, data: t.Any, path: tuple[str, ...]):
    if not isinstance(data, dict):
        raise ConfigCoerceError(f"expected mapping for {cls.__name__}, got {type(data).__name__}", path)
    allowed = {f.name for f in fields(cls) if f.init}
    extras = set(data.keys()) - allowed
    if extras:
        raise ConfigCoerceError(f"unexpected keys: {sorted(map(str, extras))!r}", path)

    # Annotations are strings under postponed evaluation.
    hints = t.get_type_hints(cls)
    kwargs = {}
    for f in fields(cls):
        if not f.init:
            continue
        f_path = (*path, f.name)
        if f.name in data:
            kwargs[f.name] = coerce(data[f.name], hints.get(f.name, t.Any), f_path)
        elif f.default is not dataclasses.MISSING:
            kwargs[f.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:
            kwargs[f.name] = f.default_factory()
        else:
            raise ConfigCoerceError("required field missing", f_path)
    return cls(**kwargs)


def coerce(value: t.Any, hint: t.Any, path: tuple[str, ...]) -> t.Any:
    """Recursive normalisation of ``value`` against a type hint."""
    origin = t.get_origin(hint)
    args = t.get_args(hint)

    if hint is t.Any:
        return value

    if hint is bool:
        # YAML gives real booleans; "yes"/"1" strings are not silently accepted.
        if isinstance(value, bool):
            return value
        raise ConfigCoerceError(f"expected bool, got {type(value).__name__}", path)

    if hint is str:
        if isinstance(value, str):
            return value
        raise ConfigCoerceError(f"expected str, got {type(value).__name__}", path)

    # List[T], Set[T], FrozenSet[T], Tuple[T, ...]
    if origin in (list, set, frozenset, tuple):
        if origin is tuple and not (len(args) == 2 and args[1] is Ellipsis):
            raise ConfigCoerceError(f"unsupported tuple type {hint!r}", path)
        elem_t = args[0] if args else t.Any
        if isinstance(value, str):
            value = value.split()
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ConfigCoerceError(f"expected list, got {type(value).__name__}", path)
        items = [coerce(v, elem_t, (*path, str(i))) for i, v in enumerate(value)]
        return origin(items)

    raise ConfigCoerceError(f"unsupported field type {hint!r}", path)


__all__ = ["ConfigCoerceError", "build_typed", "coerce"]
