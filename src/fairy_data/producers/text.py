"""Text producer - words, sentences and paragraphs.

Words come from Faker's lorem provider for the configured locale; the latin
variants always use the Latin lorem word list.
"""

from abc import abstractmethod

from faker import Faker
from faker.providers.lorem.la import Provider as LatinLoremProvider

from fairy_data.config import TextConfig
from fairy_data.producers.base import BaseProducer
from fairy_data.unique.capability import CapabilitySet, unique_exempt
from fairy_data.unique.decorator import UniquenessDecorator

DEFAULT_WORD_COUNT = 3
DEFAULT_WORD_COUNT_IN_SENTENCE = 3
DEFAULT_SENTENCE_COUNT = 3
SENTENCE_COUNT_PRECISION_MIN = 1
SENTENCE_COUNT_PRECISION_MAX = 3
DEFAULT_TEXT_CHARS = 200

LATIN_WORDS = tuple(LatinLoremProvider.word_list)

LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet, consectetur adipisicing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat. Duis aute irure "
    "dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur. "
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt "
    "mollit anim id est laborum."
)


class Texts(CapabilitySet):
    """Capability set of text-producing operations."""

    @unique_exempt
    @abstractmethod
    def limited_to(self, limit: int) -> "Texts":
        """Return texts truncated to at most limit characters (0 for no limit)."""

    @abstractmethod
    def result(self, text: str) -> str:
        """Apply the configured length limit to text."""

    @abstractmethod
    def lorem_ipsum(self) -> str: ...

    @abstractmethod
    def text(self) -> str: ...

    @abstractmethod
    def word(self, count: int = DEFAULT_WORD_COUNT) -> str: ...

    @abstractmethod
    def latin_word(self, count: int = DEFAULT_WORD_COUNT) -> str: ...

    @abstractmethod
    def latin_sentence(self, word_count: int = DEFAULT_WORD_COUNT_IN_SENTENCE) -> str: ...

    @abstractmethod
    def sentence(self, word_count: int = DEFAULT_WORD_COUNT_IN_SENTENCE) -> str: ...

    @abstractmethod
    def paragraph(self, sentence_count: int = DEFAULT_SENTENCE_COUNT) -> str: ...

    @abstractmethod
    def random_string(self, chars_count: int) -> str:
        """Generate a random string of exactly chars_count characters."""


class TextProducer(Texts):
    """Faker-backed implementation of Texts.

    The length limit is part of an immutable TextConfig; ``limited_to``
    returns a new producer sharing the same random sources.
    """

    def __init__(
        self,
        faker: Faker,
        base_producer: BaseProducer,
        config: TextConfig | None = None,
    ):
        self._faker = faker
        self._base = base_producer
        self._config = config or TextConfig()

    @property
    def config(self) -> TextConfig:
        return self._config

    def unique(self) -> Texts:
        """Return a view of this producer that never repeats a value."""
        return UniquenessDecorator.wrap(self, Texts)

    def limited_to(self, limit: int) -> "TextProducer":
        config = TextConfig.model_validate({**self._config.model_dump(), "limit": limit})
        return TextProducer(self._faker, self._base, config)

    def result(self, text: str) -> str:
        if self._config.limit > 0:
            return text[: self._config.limit]
        return text

    def lorem_ipsum(self) -> str:
        return self.result(LOREM_IPSUM)

    def text(self) -> str:
        return self.result(self._faker.text(max_nb_chars=DEFAULT_TEXT_CHARS))

    def word(self, count: int = DEFAULT_WORD_COUNT) -> str:
        return self.result(" ".join(self._faker.words(nb=count)))

    def latin_word(self, count: int = DEFAULT_WORD_COUNT) -> str:
        return self.result(" ".join(self._faker.words(nb=count, ext_word_list=LATIN_WORDS)))

    def latin_sentence(self, word_count: int = DEFAULT_WORD_COUNT_IN_SENTENCE) -> str:
        return self.result(
            self._faker.sentence(
                nb_words=word_count,
                variable_nb_words=False,
                ext_word_list=LATIN_WORDS,
            )
        )

    def sentence(self, word_count: int = DEFAULT_WORD_COUNT_IN_SENTENCE) -> str:
        return self.result(self._faker.sentence(nb_words=word_count, variable_nb_words=False))

    def paragraph(self, sentence_count: int = DEFAULT_SENTENCE_COUNT) -> str:
        extra = self._base.random_between(SENTENCE_COUNT_PRECISION_MIN, SENTENCE_COUNT_PRECISION_MAX)
        sentences = [self.sentence() for _ in range(sentence_count + extra)]
        return self.result(" ".join(sentences))

    def random_string(self, chars_count: int) -> str:
        return self._faker.pystr(min_chars=chars_count, max_chars=chars_count)
