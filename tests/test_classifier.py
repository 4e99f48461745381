import pytest

from backup_inventory.core.classifier import classify, is_immutable
from backup_inventory.core.models import FileClass


@pytest.mark.parametrize(
    "path",
    [
        "a/objects/xx/deadbeef",
        "/daily/objects/ab/cd",
        "pack-123.pack",
        "/weekly/data/pack-123.index",
    ],
)
def test_classify_immutable_paths(path: str) -> None:
    assert classify(path) is FileClass.IMMUTABLE
    assert is_immutable(path)


@pytest.mark.parametrize(
    "path",
    [
        "refs/heads/main",
        "/daily/config",
        "objects/ab/cd",
        "/daily/objects",
        "/daily/pack-1.packed",
        "/daily/index",
        "",
    ],
)
def test_classify_mutable_paths(path: str) -> None:
    assert classify(path) is FileClass.MUTABLE
    assert not is_immutable(path)


def test_classify_is_stable_across_calls() -> None:
    path = "/daily/objects/ab/cd"
    assert {classify(path) for _ in range(5)} == {FileClass.IMMUTABLE}
