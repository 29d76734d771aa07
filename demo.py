#!/usr/bin/env python3
"""
Demo script showing basic usage of fairy-data.

Run this script after installing the package:
    pip install -e .
    python demo.py
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from fairy_data import ExhaustionError, Fairy, Instant, Int32, UnsupportedFieldType


@dataclass
class Customer:
    name: str = ""
    age: Int32 = 0
    balance: Decimal = Decimal("0")
    birthday: date | None = None
    registered: Instant | None = None
    last_login: datetime | None = None
    tags: list[str] | None = None


def demo_text(fairy):
    """Demonstrate the text producer."""
    print("=" * 60)
    print("1. TEXT")
    print("=" * 60)

    texts = fairy.text_producer()
    print(f"Word:      {texts.word()}")
    print(f"Sentence:  {texts.sentence()}")
    print(f"Limited:   {texts.limited_to(20).paragraph()}")
    print()


def demo_unique(fairy):
    """Demonstrate the uniqueness decorator."""
    print("=" * 60)
    print("2. UNIQUE VALUES")
    print("=" * 60)

    words = fairy.text_producer().unique()
    print(f"Unique words: {[words.word(1) for _ in range(5)]}")

    letters = fairy.text_producer().limited_to(1).unique()
    produced = []
    try:
        while True:
            produced.append(letters.word())
    except ExhaustionError as e:
        print(f"Exhausted after {len(produced)} letters ({e.attempts} attempts on the last call)")
    print()


def demo_bewitch(fairy):
    """Demonstrate bewitching objects."""
    print("=" * 60)
    print("3. BEWITCH")
    print("=" * 60)

    magic = fairy.magic_producer()

    customer = Customer()
    magic.bewitch(customer)
    print(f"All fields:  {customer}")

    customer = Customer()
    magic.bewitch(customer, "name", "age")
    print(f"Name + age:  {customer}")

    try:
        magic.bewitch(Customer(), "tags")
    except UnsupportedFieldType as e:
        print(f"Strict mode: {e}")
    print()


def main():
    fairy = Fairy.create(seed=42)
    demo_text(fairy)
    demo_unique(fairy)
    demo_bewitch(fairy)


if __name__ == "__main__":
    main()
