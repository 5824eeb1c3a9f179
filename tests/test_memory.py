import pytest

from dslab.memory import RESERVED_SIZE, MemoryManager, main


def _free_sizes(manager):
    return [block.size for block in manager.blocks() if block.is_free]


def _process_ids(manager):
    return [block.pid for block in manager.blocks() if block.pid is not None]


def test_initial_layout_alternates_reserved_and_free():
    manager = MemoryManager([100, 50])
    blocks = manager.blocks()
    assert [block.reserved for block in blocks] == [True, False, True, False, True]
    assert _free_sizes(manager) == [100, 50]
    assert all(b.size == RESERVED_SIZE for b in blocks if b.reserved)


def test_constructor_rejects_bad_partitions():
    with pytest.raises(ValueError):
        MemoryManager([])
    with pytest.raises(ValueError):
        MemoryManager([10, 0])


def test_exact_fit_replaces_hole():
    manager = MemoryManager([100, 50])
    assert manager.create("a", 50) is True
    blocks = manager.blocks()
    assert blocks[3].pid == 0
    assert blocks[3].name == "a"
    assert _free_sizes(manager) == [100]


def test_best_fit_picks_smallest_hole():
    manager = MemoryManager([100, 50])
    manager.create("a", 40)
    blocks = manager.blocks()
    assert blocks[3].pid == 0
    assert blocks[3].size + blocks[4].size == 50
    assert blocks[1].size == 100


def test_tie_goes_to_first_hole():
    manager = MemoryManager([50, 50])
    manager.create("a", 50)
    assert manager.blocks()[1].pid == 0
    assert _free_sizes(manager) == [50]


def test_ids_increase():
    manager = MemoryManager([100])
    manager.create("a", 10)
    manager.create("b", 10)
    assert _process_ids(manager) == [0, 1]


def test_name_truncated():
    manager = MemoryManager([100])
    manager.create("abcdefghijklmnopqrstuvwxyz", 10)
    assert manager.blocks()[1].name == "abcdefghijklmno"


def test_too_large_raises():
    manager = MemoryManager([30, 20])
    with pytest.raises(ValueError):
        manager.create("big", 31)
    assert manager.queued() == []


def test_queued_when_nothing_fits():
    manager = MemoryManager([50])
    manager.create("a", 50)
    assert manager.create("b", 30) is False
    assert [(b.pid, b.name) for b in manager.queued()] == [(1, "b")]


def test_stop_starts_queued_process():
    manager = MemoryManager([50])
    manager.create("a", 50)
    manager.create("b", 30)
    started = manager.stop(0)
    assert [block.pid for block in started] == [1]
    assert manager.queued() == []
    assert _process_ids(manager) == [1]
    assert sum(b.size for b in manager.blocks() if not b.reserved) == 50


def test_stop_queued_process_dequeues():
    manager = MemoryManager([50])
    manager.create("a", 50)
    manager.create("b", 30)
    assert manager.stop(1) == []
    assert manager.queued() == []
    assert _process_ids(manager) == [0]


def test_stop_unknown_raises():
    manager = MemoryManager([50])
    with pytest.raises(KeyError):
        manager.stop(5)
    with pytest.raises(KeyError):
        manager.stop(-1)


def test_stopping_merges_holes():
    manager = MemoryManager([100])
    manager.create("a", 30)
    manager.create("b", 30)
    manager.stop(1)
    assert len(_free_sizes(manager)) == 1
    assert sum(b.size for b in manager.blocks() if not b.reserved) == 100
    manager.stop(0)
    assert _free_sizes(manager) == [100]
    assert _process_ids(manager) == []


def test_snapshots_are_copies():
    manager = MemoryManager([100])
    manager.blocks()[1].size = 1
    assert _free_sizes(manager) == [100]


def _feed(monkeypatch, answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_main_runs_session(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "100", "1", "proc", "30", "3", "0", "5"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "[Started]" in out
    assert "[Stopped]" in out
    assert "Exiting..." in out


def test_main_rejects_no_partitions(monkeypatch, capsys):
    _feed(monkeypatch, ["0"])
    assert main([]) == 1
    assert "Terminating" in capsys.readouterr().out