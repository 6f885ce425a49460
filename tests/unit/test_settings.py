from __future__ import annotations

from utils.settings import DEFAULT_MAX_COUNT, clamp_count, make_rng, max_count


def test_max_count_default_and_override(monkeypatch) -> None:
    monkeypatch.delenv("TESTDATA_MAX_COUNT", raising=False)
    assert max_count() == DEFAULT_MAX_COUNT
    monkeypatch.setenv("TESTDATA_MAX_COUNT", "10")
    assert max_count() == 10
    assert clamp_count(500) == 10
    assert clamp_count(-3) == 1


def test_invalid_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("TESTDATA_MAX_COUNT", "lots")
    assert max_count() == DEFAULT_MAX_COUNT
    monkeypatch.setenv("TESTDATA_MAX_COUNT", "0")
    assert max_count() == DEFAULT_MAX_COUNT


def test_seeded_rng(monkeypatch) -> None:
    monkeypatch.setenv("TESTDATA_SEED", "42")
    assert make_rng().random() == make_rng().random()
    monkeypatch.setenv("TESTDATA_SEED", "not-a-number")
    assert 0.0 <= make_rng().random() < 1.0
