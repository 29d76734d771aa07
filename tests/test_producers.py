"""Tests for the random producers."""

from datetime import datetime

import pytest

from fairy_data.config import DateConfig, TextConfig
from fairy_data.producers.base import BaseProducer
from fairy_data.producers.date import DateProducer
from fairy_data.producers.text import LOREM_IPSUM, TextProducer, Texts


class TestBaseProducer:
    """Tests for BaseProducer."""

    def test_int_range_is_inclusive(self):
        producer = BaseProducer(seed=1)

        values = {producer.random_between(1, 3) for _ in range(200)}

        assert values == {1, 2, 3}

    def test_float_range(self):
        producer = BaseProducer(seed=1)

        for _ in range(100):
            value = producer.random_between(-1.5, 2.5)
            assert isinstance(value, float)
            assert -1.5 <= value <= 2.5

    def test_full_float_range_does_not_overflow(self):
        producer = BaseProducer(seed=1)
        low, high = -1.7976931348623157e308, 1.7976931348623157e308

        for _ in range(100):
            value = producer.random_between(low, high)
            assert low <= value <= high

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            BaseProducer().random_between(5, 1)

    def test_seed_is_deterministic(self):
        first = BaseProducer(seed=7)
        second = BaseProducer(seed=7)

        assert [first.random_int(1000) for _ in range(10)] == [second.random_int(1000) for _ in range(10)]

    def test_random_element(self):
        producer = BaseProducer(seed=3)

        assert producer.random_element(["a", "b"]) in ("a", "b")
        with pytest.raises(ValueError):
            producer.random_element([])


class TestDateProducer:
    """Tests for DateProducer."""

    def test_dates_within_year_window(self):
        producer = DateProducer(BaseProducer(seed=5))

        for _ in range(200):
            value = producer.random_date_between_years(2000, 2100)
            assert isinstance(value, datetime)
            assert value.tzinfo is None
            assert 2000 <= value.year < 2100

    def test_single_year_window(self):
        producer = DateProducer(BaseProducer(seed=5))

        for _ in range(50):
            assert producer.random_date_between_years(2024, 2025).year == 2024

    def test_configured_window(self):
        producer = DateProducer(BaseProducer(seed=5), DateConfig(year_low=1990, year_high=1992))

        for _ in range(50):
            assert producer.random_date_in_window().year in (1990, 1991)

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            DateProducer(BaseProducer()).random_date_between_years(2100, 2000)


class TestTextProducer:
    """Tests for TextProducer."""

    def test_is_texts_capability(self, fairy):
        assert isinstance(fairy.text_producer(), Texts)

    def test_word_counts(self, fairy):
        texts = fairy.text_producer()

        assert len(texts.word().split()) == 3
        assert len(texts.word(5).split()) == 5
        assert len(texts.latin_word(2).split()) == 2

    def test_sentence_and_paragraph(self, fairy):
        texts = fairy.text_producer()

        assert texts.sentence().endswith(".")
        assert texts.latin_sentence(4).endswith(".")
        assert len(texts.paragraph()) > len(texts.sentence())

    def test_lorem_ipsum(self, fairy):
        assert fairy.text_producer().lorem_ipsum() == LOREM_IPSUM

    def test_random_string_length(self, fairy):
        assert len(fairy.text_producer().random_string(17)) == 17

    def test_limited_to_returns_new_producer(self, fairy):
        texts = fairy.text_producer()

        limited = texts.limited_to(5)

        assert limited is not texts
        assert limited.config == TextConfig(limit=5)
        assert texts.config.limit == 0
        assert len(limited.paragraph()) == 5
        assert len(texts.paragraph()) > 5

    def test_negative_limit_rejected(self, fairy):
        with pytest.raises(ValueError):
            fairy.text_producer().limited_to(-1)

    def test_unique_view(self, fairy):
        unique = fairy.text_producer().unique()

        words = [unique.word() for _ in range(50)]

        assert isinstance(unique, Texts)
        assert len(set(words)) == 50

    def test_limited_to_is_exempt_in_unique_view(self, fairy):
        unique = fairy.text_producer().unique()

        first = unique.limited_to(3)
        second = unique.limited_to(3)

        assert first.config == second.config
        assert len(unique.uniqueness.session) == 0
