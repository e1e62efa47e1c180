from __future__ import annotations

import decimal
import inspect
import logging
import math
import numbers
from typing import Callable, Optional

from multipledispatch import dispatch

from pycurry.constant import Loggers, Messages
from pycurry.errors import InvalidArgumentError

logger = logging.getLogger(Loggers.ARITY)

_namespace = dict()

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def _non_negative(value, arity: int) -> int:
    if arity < 0:
        raise InvalidArgumentError(Messages.NEGATIVE.format(value))
    return arity


@dispatch(object, namespace=_namespace)
def coerce_arity(value) -> int:
    """Turn an explicitly supplied arity into a non-negative int.

    Integers are taken as they are, other real numbers are floored.
    Anything else, including bools, is rejected.
    """
    raise InvalidArgumentError(Messages.NOT_NUMERIC.format(value))


@dispatch(bool, namespace=_namespace)
def coerce_arity(value) -> int:
    raise InvalidArgumentError(Messages.NOT_NUMERIC.format(value))


@dispatch(numbers.Integral, namespace=_namespace)
def coerce_arity(value) -> int:
    return _non_negative(value, int(value))


@dispatch(numbers.Real, namespace=_namespace)
def coerce_arity(value) -> int:
    if not math.isfinite(value):
        raise InvalidArgumentError(Messages.NOT_FINITE.format(value))
    return _non_negative(value, math.floor(value))


@dispatch(decimal.Decimal, namespace=_namespace)
def coerce_arity(value) -> int:
    if not value.is_finite():
        raise InvalidArgumentError(Messages.NOT_FINITE.format(value))
    return _non_negative(value, math.floor(value))


def signature_arity(target: Callable) -> int:
    """Count the parameters of ``target`` that must be supplied.

    Parameters with a default and ``*args``/``**kwargs`` do not count.
    """
    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(Messages.NO_SIGNATURE.format(target)) from e
    return sum(1 for p in signature.parameters.values()
               if p.kind not in _VARIADIC and p.default is inspect.Parameter.empty)


def resolve_arity(target: Callable, arity: Optional[object] = None) -> int:
    if arity is None:
        resolved = signature_arity(target)
        logger.debug("arity of %r taken from its signature: %d", target, resolved)
        return resolved
    return coerce_arity(arity)
