"""Shared base for report models.

Reports are frozen end to end: attribute assignment is rejected by pydantic,
collections are tuples and mappings are ``FrozenDict`` instances.
"""

from __future__ import annotations

from typing import Annotated, Any, NoReturn, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict

K = TypeVar("K")
V = TypeVar("V")


class FrozenDict(dict):
    """A dict that rejects in-place changes. Serializes and compares as a plain dict."""

    def _read_only(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} is read-only")

    __setitem__ = _read_only
    __delitem__ = _read_only
    __ior__ = _read_only
    clear = _read_only
    pop = _read_only
    popitem = _read_only
    setdefault = _read_only
    update = _read_only

    def __reduce__(self):
        return (type(self), (dict(self),))


def freeze(value: dict) -> FrozenDict:
    return FrozenDict(value)


ReadOnlyDict = Annotated[dict[K, V], AfterValidator(freeze)]

EMPTY: FrozenDict = FrozenDict()


class Report(BaseModel):
    model_config = ConfigDict(frozen=True)
