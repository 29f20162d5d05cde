"""Tests for the build-scoped dependency registry."""

import threading

from etapack.registry import DependencyRegistry


def test_claim_returns_names_only_the_first_time():
    registry = DependencyRegistry()
    assert registry.claim(["header"]) == ["header"]
    assert registry.claim(["header"]) == []
    assert registry.claim(["header", "footer"]) == ["footer"]


def test_claim_preserves_order_and_collapses_duplicates():
    registry = DependencyRegistry()
    assert registry.claim(["b", "a", "b", "c"]) == ["b", "a", "c"]


def test_claim_marks_everything_seen():
    registry = DependencyRegistry()
    registry.claim(["a", "b"])
    assert "a" in registry
    assert "b" in registry
    assert "c" not in registry
    assert len(registry) == 2
    assert registry.seen() == frozenset({"a", "b"})


def test_fresh_registries_are_independent():
    first = DependencyRegistry()
    second = DependencyRegistry()
    first.claim(["header"])
    assert second.claim(["header"]) == ["header"]


def test_concurrent_claims_hand_out_each_name_once():
    registry = DependencyRegistry()
    names = [f"partial-{i}" for i in range(50)]
    results: list[list[str]] = []
    lock = threading.Lock()
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        claimed = registry.claim(names)
        with lock:
            results.append(claimed)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    flattened = [name for claimed in results for name in claimed]
    assert sorted(flattened) == sorted(names)
