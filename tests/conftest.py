"""Shared fixtures for topicount tests."""

import pytest

import topicount
from topicount import DictionaryStore, TopicAnalyzer


@pytest.fixture
def store():
    """Two small topics, in a fixed order."""
    return DictionaryStore({
        "Programming": ["алгоритм", "функция", "класс", "структура данных"],
        "Networks": ["сеть", "маршрутизатор", "сетевой переход"],
    })


@pytest.fixture
def strict(store):
    return TopicAnalyzer(store, fuzzy=False)


@pytest.fixture
def fuzzy(store):
    return TopicAnalyzer(store, fuzzy=True)


@pytest.fixture(scope="session")
def default_analyzer():
    """Analyzer over the bundled dictionaries, loaded once."""
    return topicount.load()
