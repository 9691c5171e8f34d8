"""
Small standalone utility functions and record types.

None of these call each other; each is meant to be used directly.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Protocol, Sequence, TypedDict, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar('T')

MIN_RATING = 4
SQUARE_DELAY = 1.0  # seconds

WEEKEND = "Weekend"
WEEKDAY = "Weekday"


class NegativeNumberError(ValueError):
    """Raised when a non-negative number is required"""

    def __init__(self, value):
        super().__init__("Negative number not allowed")
        self.value = value


def format_string(input: str, to_upper: Optional[bool] = None) -> str:
    """Upper-cases the input unless to_upper is explicitly something other than True"""
    if to_upper is True or to_upper is None:
        return input.upper()
    return input.lower()


class Item(TypedDict):
    title: str
    rating: float


def filter_by_rating(items: List[Item]) -> List[Item]:
    """Keeps the items rated MIN_RATING or better, in their original order"""
    return [item for item in items if item['rating'] >= MIN_RATING]


def concatenate_arrays(*arrays: Sequence[T]) -> List[T]:
    """Joins any number of sequences into a single new list"""
    result: List[T] = []
    for array in arrays:
        result.extend(array)
    return result


class HasMakeYear(Protocol):
    make: str
    year: int


def get_info(record: HasMakeYear) -> str:
    """Formats the make and year of anything that has them"""
    return f"Make: {record.make}, Year: {record.year}"


@dataclass(frozen=True)
class Vehicle:
    make: str
    year: int

    def get_info(self) -> str:
        return get_info(self)


@dataclass(frozen=True)
class Car:
    """A vehicle with a model name.

    Holds the vehicle fields itself rather than subclassing Vehicle, so
    get_info works through the shared make/year shape.
    """

    make: str
    year: int
    model: str

    @property
    def vehicle(self) -> Vehicle:
        return Vehicle(self.make, self.year)

    def get_info(self) -> str:
        return get_info(self)

    def get_model(self) -> str:
        return f"Model: {self.model}"


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class Number:
    value: Union[int, float]


Value = Union[Text, Number]


def as_value(raw) -> Value:
    """Wraps a raw str or number in its Value variant"""
    if isinstance(raw, str):
        return Text(raw)
    # bool is an int subclass but not a number here
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return Number(raw)
    raise TypeError(f"Expected str, int or float, got {type(raw).__name__}")


def process_value(value: Value) -> Union[int, float]:
    """Length of a Text, or double a Number"""
    if isinstance(value, Text):
        return len(value.value)
    if isinstance(value, Number):
        return value.value * 2
    raise TypeError(f"Expected Text or Number, got {type(value).__name__}")


class Product(TypedDict):
    name: str
    price: float


def get_most_expensive_product(products: List[Product]) -> Optional[Product]:
    """Returns the highest priced product; the first one wins a tie"""
    if not products:
        return None

    most_expensive = products[0]
    for product in products[1:]:
        if product['price'] > most_expensive['price']:
            most_expensive = product
    return most_expensive


class Day(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


def get_day_type(day: Day) -> str:
    """Classifies a day; only Sunday counts as the weekend"""
    return WEEKEND if day == Day.SUNDAY else WEEKDAY


async def square_async(n: Union[int, float]) -> Union[int, float]:
    """Squares n after a fixed delay of SQUARE_DELAY seconds"""
    if n < 0:
        logger.debug("Rejecting negative input %r", n)
        raise NegativeNumberError(n)

    logger.debug("Squaring %r in %.1fs", n, SQUARE_DELAY)
    await asyncio.sleep(SQUARE_DELAY)
    return n * n
