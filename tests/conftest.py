import pytest

from tests.helpers import T0, T1, T2, FakeLister, RecordingSink


@pytest.fixture
def backup_tree() -> FakeLister:
    return FakeLister(
        {
            "/daily/objects/ab/cd": (100, T1),
            "/daily/refs/main": (10, T2),
            "/weekly/pack-1.pack": (2048, T1),
            "/weekly/pack-1.index": (64, T1),
            "/weekly/locks/lock": (0, T0),
        },
        directories=["/empty"],
    )


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()
