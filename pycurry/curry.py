from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar, Union

from pycurry.arity import coerce_arity, resolve_arity
from pycurry.constant import Loggers, Messages
from pycurry.errors import InvalidArgumentError

ReturnType = TypeVar("ReturnType")

logger = logging.getLogger(Loggers.ENGINE)


def curry(fn: Callable[..., ReturnType], arity: Optional[object] = None) -> Partial[ReturnType]:
    """Wrap ``fn`` so it can be fed its arguments over several calls.

    The returned object collects positional and keyword arguments until
    at least ``arity`` of them have been supplied, then calls ``fn`` with
    all of them and returns its result. Extra arguments are passed through.
    When ``arity`` is omitted it is the number of parameters of ``fn``
    that have no default.

    >>> add = curry(lambda a, b, c: a + b + c)
    >>> add(1)(2)(3)
    6
    >>> add(1, 2, 3)
    6

    Raises InvalidArgumentError when ``fn`` is not callable or ``arity``
    is not a usable number.
    """
    if not callable(fn):
        raise InvalidArgumentError(Messages.NOT_CALLABLE)
    num_args = resolve_arity(fn, arity)
    logger.debug("curried %r with arity %d", fn, num_args)
    return Partial(num_args, fn)


def curried(arity: Union[Callable[..., ReturnType], object, None] = None):
    """Decorator form of :func:`curry`, usable as ``@curried`` or ``@curried(n)``."""
    if callable(arity):
        return curry(arity)

    # validate now so a bad arity fails at decoration time
    if arity is not None:
        coerce_arity(arity)

    def decorator(fn: Callable[..., ReturnType]) -> Partial[ReturnType]:
        return curry(fn, arity)

    return decorator


class Partial(Generic[ReturnType]):
    def __init__(
            self, num_args: int, fn: Callable[..., ReturnType],
            args: Tuple[Any, ...] = (), kwargs: Optional[Dict[str, Any]] = None
    ) -> None:
        functools.update_wrapper(self, fn, updated=())
        self._num_args = num_args
        self._fn = fn
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})

    @property
    def func(self) -> Callable[..., ReturnType]:
        return self._fn

    @property
    def arity(self) -> int:
        return self._num_args

    @property
    def args(self) -> Tuple[Any, ...]:
        return self._args

    @property
    def keywords(self) -> Dict[str, Any]:
        return dict(self._kwargs)

    @property
    def remaining(self) -> int:
        return max(self._num_args - len(self._args) - len(self._kwargs), 0)

    def __call__(self, /, *more_args, **more_kwargs) -> Union[Partial[ReturnType], ReturnType]:
        all_args = self._args + more_args  # tuple addition
        all_kwargs = {**self._kwargs, **more_kwargs}  # later keywords win
        num_args = len(all_args) + len(all_kwargs)
        if num_args >= self._num_args:
            logger.debug("invoking %r with %d arguments", self._fn, num_args)
            return self._fn(*all_args, **all_kwargs)
        else:
            return Partial(self._num_args, self._fn, all_args, all_kwargs)

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return Partial(self._num_args, self._fn, (instance,) + self._args, self._kwargs)

    def __repr__(self):
        return f"Partial({self._fn!r}, arity={self._num_args}, args={self._args}, kwargs={self._kwargs})"
