"""Producers - the random sources behind generated values."""

from fairy_data.producers.base import BaseProducer
from fairy_data.producers.date import DateProducer
from fairy_data.producers.text import TextProducer, Texts

__all__ = [
    "BaseProducer",
    "DateProducer",
    "TextProducer",
    "Texts",
]
