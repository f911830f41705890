import logging
from typing import Type

from .exceptions import OutOfRangeException


logger = logging.getLogger(__name__)


class PropertyDescriptor(object):
    """Typed attribute stored into the instance dictionary.

    With read_only=True the attribute can be set only once, i.e. by the
    constructor; with nullable=True None is accepted too.
    """

    def __init__(self, name: str, _type: type, read_only=False, nullable=False):
        self.name = name
        self.type = _type
        self.read_only = read_only
        self.nullable = nullable

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.name})>'

    def __get__(self, instance, owner):
        if instance is None:
            return self

        data = instance.__dict__
        if self.name not in data:
            raise AttributeError(f"no '{self.name}' here!")

        return data[self.name]

    def validate(self, value):
        if value is None and self.nullable:
            return

        if not isinstance(value, self.type):
            raise ValueError(f"'{self.name}' must be of type {self.type.__name__}, not {value.__class__.__name__}")

    def __set__(self, instance, value):
        data = instance.__dict__

        if self.read_only and self.name in data:
            raise AttributeError(f"'{self.name}' is read-only")

        self.validate(value)

        logger.debug("setting '%s' to %r", self.name, value)
        data[self.name] = value


class RangeDescriptor(PropertyDescriptor):
    """Integer attribute that must stay between lower and upper (both included).

    The exception raised for a value out of range can be customized via "exc",
    it will receive the name of the attribute as chain."""

    def __init__(self, name: str, lower: int, upper: int, exc: Type[OutOfRangeException] = OutOfRangeException, **kw):
        super().__init__(name, int, **kw)
        self.lower = lower
        self.upper = upper
        self.exc = exc

    def validate(self, value):
        # bool is an int but nobody wants block True
        if isinstance(value, bool) or not isinstance(value, int):
            raise self.exc([self.name], f"'{self.name}' must be an integer, not {value.__class__.__name__}")

        if not self.lower <= value <= self.upper:
            raise self.exc([self.name], f"'{self.name}' must be in the range {self.lower}..{self.upper}, got {value}")
