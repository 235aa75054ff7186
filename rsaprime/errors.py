# rsaprime/errors.py
# Failures the primality core raises instead of returning a verdict.


class InvalidModulus(ZeroDivisionError):
    """Modular arithmetic was asked to reduce by zero."""


class WorkerFailure(RuntimeError):
    """A threaded Miller–Rabin worker could not report a result.

    The original exception is chained as ``__cause__``.
    """
