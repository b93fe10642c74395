"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, replace

from hypothesis import strategies as st

from updatelift import Effects
from updatelift.config import get_settings


@dataclass(frozen=True, slots=True)
class Counter:
    count: int = 0


@dataclass(frozen=True, slots=True)
class Page:
    title: str = "home"
    counter: Counter = Counter()
    visits: int = 0


@dataclass(frozen=True, slots=True)
class LogEffect:
    text: str


@dataclass(frozen=True, slots=True)
class Tagged:
    tag: str
    effect: object


def counter_update(msg: str, counter: Counter) -> tuple[Counter, Effects]:
    """Child update used across composer tests."""
    if msg == "inc":
        return replace(counter, count=counter.count + 1), Effects.of(LogEffect("incremented"))
    if msg == "twice":
        return (
            replace(counter, count=counter.count + 2),
            Effects.of(LogEffect("first"), LogEffect("second")),
        )
    return counter, Effects.none()


effects_strategy = st.lists(st.integers(), max_size=5).map(lambda xs: Effects(tuple(xs)))


@pytest.fixture
def fresh_settings():
    """Drop cached settings so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def page():
    return Page(title="dashboard", counter=Counter(3), visits=7)


@pytest.fixture
def get_counter():
    return lambda page: page.counter


@pytest.fixture
def set_counter():
    return lambda counter, page: replace(page, counter=counter)
