"""
Shared pytest fixtures for all tests.
"""
import pytest

from tab_management import ContentCache, TabInfo, TabOrderStore
from utils.event_logger import EventLogger


@pytest.fixture
def event_logger():
    """Quiet event logger that records history for assertions"""
    return EventLogger(debug_mode=False)


@pytest.fixture
def make_tab():
    """Factory for TabInfo descriptors"""
    def _create(tab_id: str, label: str = None, icon=None):
        return TabInfo(tab_id=tab_id, label=label or f"Tab {tab_id}", icon=icon)
    return _create


@pytest.fixture
def store_factory(event_logger, make_tab):
    """Factory for TabOrderStore instances, optionally pre-filled with tabs"""
    def _create(tab_ids=(), active=None, strict: bool = False):
        store = TabOrderStore(event_logger=event_logger, strict=strict)
        for tab_id in tab_ids:
            # Opening at the end keeps the given order
            store.set_active_tab(None)
            store.open_tab(make_tab(tab_id))
        store.set_active_tab(active)
        return store
    return _create


@pytest.fixture
def cache_factory(event_logger):
    """Factory for ContentCache instances"""
    def _create(capacity: int = 5):
        return ContentCache(capacity=capacity, event_logger=event_logger)
    return _create
