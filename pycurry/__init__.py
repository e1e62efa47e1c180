from pycurry.arity import coerce_arity, resolve_arity, signature_arity
from pycurry.curry import Partial, curried, curry
from pycurry.errors import InvalidArgumentError

version = '0.1.0'

__all__ = [
    'InvalidArgumentError',
    'Partial',
    'coerce_arity',
    'curried',
    'curry',
    'resolve_arity',
    'signature_arity',
]
