from decimal import Decimal
from fractions import Fraction
import functools
import inspect
from pycurry import InvalidArgumentError, coerce_arity, curry, resolve_arity, signature_arity
from pycurry.constant import Messages
import unittest
from unittest.mock import patch


class TestCoerceArity(unittest.TestCase):
    def test_integers(self) -> None:
        self.assertEqual(0, coerce_arity(0))
        self.assertEqual(3, coerce_arity(3))

    def test_reals_are_floored(self) -> None:
        self.assertEqual(2, coerce_arity(2.7))
        self.assertEqual(0, coerce_arity(0.5))
        self.assertEqual(3, coerce_arity(Fraction(7, 2)))
        self.assertEqual(3, coerce_arity(Decimal('3.9')))

    def test_rejected(self) -> None:
        for value in (
            'x', '3', True, False, 1j, [2], -1, -0.5,
            float('nan'), float('inf'), Decimal('NaN'), Decimal('-Infinity'),
        ):
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgumentError):
                    coerce_arity(value)


class TestSignatureArity(unittest.TestCase):
    def test_counts_parameters_without_defaults(self) -> None:
        def f(a, b=1, *args, c, d=2, **kwargs):
            pass

        self.assertEqual(2, signature_arity(f))
        self.assertEqual(0, signature_arity(lambda *xs: xs))
        self.assertEqual(3, signature_arity(lambda a, b, c, /: a))

    def test_functools_partial(self) -> None:
        def f(a, b, c):
            pass

        self.assertEqual(1, signature_arity(functools.partial(f, 1, 2)))

    def test_classes(self) -> None:
        class Point:
            def __init__(self, x, y):
                self.x, self.y = x, y

        point = curry(Point)(1)(2)
        self.assertEqual((1, 2), (point.x, point.y))

    def test_uninspectable_target(self) -> None:
        with patch.object(inspect, 'signature', side_effect=ValueError):
            with self.assertRaises(InvalidArgumentError) as cm:
                signature_arity(len)
            with self.assertRaises(InvalidArgumentError):
                curry(len)
            self.assertEqual(1, curry(len, 1).arity)
        self.assertEqual(Messages.NO_SIGNATURE.format(len), str(cm.exception))


class TestResolveArity(unittest.TestCase):
    def test_explicit_wins(self) -> None:
        self.assertEqual(5, resolve_arity(lambda a: a, 5))

    def test_explicit_invalid_does_not_fall_back(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            resolve_arity(lambda a: a, 'x')

    def test_omitted_uses_signature(self) -> None:
        self.assertEqual(2, resolve_arity(lambda a, b: a))
