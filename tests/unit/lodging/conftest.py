from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from lodging.config import Settings
from lodging.directory import Directory
from lodging.person.domain.entity import Guest
from lodging.person.domain.value_object import GuestId
from lodging.shared.domain import Age, IsoDateTime, PersonName

FIXED_NOW = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings():
    """全テスト共通の Settings フィクスチャ"""
    return Settings(hotel_name="Test Hotel", currency_code="INR")


@pytest.fixture
def fixed_clock():
    return lambda: IsoDateTime(FIXED_NOW)


@pytest.fixture
def directory(settings, fixed_clock):
    return Directory.create(settings=settings, clock=fixed_clock)


@pytest.fixture
def create_guest():
    """Guest を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(guest_id: int = 7, name: str = "Asha", age: int = 30) -> Guest:
        return Guest(id=GuestId(guest_id), name=PersonName(name), age=Age(age))

    return _factory


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
