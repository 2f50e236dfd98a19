"""
# EasyLaTeX: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class CodeExecutionException(Exception):
    pass


class FixedBaseColumnsMutateException(Exception):
    pass


class NonConsumingBlockFeedException(Exception):
    pass


class OccupiedPushbackException(Exception):
    pass
