"""Fairy - entry point wiring all producers to one configuration.

Every producer created by a Fairy shares the same seeded random source, so a
seed makes a whole generation run reproducible.
"""

from typing import Any, TypeVar

from faker import Faker

from fairy_data.config import FairyConfig
from fairy_data.magic.bewitcher import MagicProducer
from fairy_data.producers.base import BaseProducer
from fairy_data.producers.date import DateProducer
from fairy_data.producers.text import TextProducer
from fairy_data.unique.decorator import UniquenessDecorator

T = TypeVar("T")


class Fairy:
    """Factory for producers sharing one configuration and random source."""

    def __init__(self, config: FairyConfig | None = None):
        self._config = config or FairyConfig()

        self._base_producer = BaseProducer(seed=self._config.seed)
        self._faker = Faker(self._config.locale)
        if self._config.seed is not None:
            self._faker.seed_instance(self._config.seed)

        self._date_producer = DateProducer(self._base_producer, self._config.dates)
        self._text_producer = TextProducer(self._faker, self._base_producer, self._config.text)
        self._magic_producer = MagicProducer(
            self._base_producer,
            self._text_producer,
            self._date_producer,
        )

    @classmethod
    def create(cls, config: FairyConfig | None = None, **overrides: Any) -> "Fairy":
        """Create a Fairy, optionally overriding top-level config fields.

        Example:
            fairy = Fairy.create(seed=42, locale="de_DE")
        """
        config = config or FairyConfig()
        if overrides:
            config = FairyConfig.model_validate({**config.model_dump(), **overrides})
        return cls(config)

    @property
    def config(self) -> FairyConfig:
        return self._config

    def base_producer(self) -> BaseProducer:
        return self._base_producer

    def date_producer(self) -> DateProducer:
        return self._date_producer

    def text_producer(self) -> TextProducer:
        return self._text_producer

    def magic_producer(self) -> MagicProducer:
        return self._magic_producer

    def unique(self, capability_set: T, interface: type[T] | None = None) -> T:
        """Wrap any capability set so it never returns the same value twice."""
        return UniquenessDecorator.wrap(capability_set, interface)
