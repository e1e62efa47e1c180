class Messages:
    NOT_CALLABLE = "Expected a function"
    NOT_NUMERIC = "Expected a number for arity, got {!r}"
    NOT_FINITE = "Expected a finite arity, got {!r}"
    NEGATIVE = "Expected a non-negative arity, got {!r}"
    NO_SIGNATURE = "Cannot determine the arity of {!r}, pass it explicitly"


class Loggers:
    ROOT = "pycurry"
    ENGINE = ROOT + ".curry"
    ARITY = ROOT + ".arity"
