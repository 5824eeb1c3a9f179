"""Best-fit memory partition simulator with a waiting queue and a menu."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from itertools import count

RESERVED_SIZE = 10
FREE_NAME = "Free"
RESERVED_NAME = "Data"
NAME_LIMIT = 15

MENU = (
    "\n----Menu----\n"
    "  1. Create new process\n"
    "  2. View Process List\n"
    "  3. Stop a process\n"
    "  4. View QueueList\n"
    "  5. Exit"
)


@dataclass
class Block:
    """A run of memory: a process, a free hole or a reserved separator."""

    size: int
    pid: int | None = None
    name: str = FREE_NAME
    reserved: bool = False

    @property
    def is_free(self) -> bool:
        return self.pid is None and not self.reserved


def _reserved() -> Block:
    return Block(RESERVED_SIZE, name=RESERVED_NAME, reserved=True)


class MemoryManager:
    """Places processes into the smallest free hole that fits them.

    Partitions are separated by reserved blocks, so freed holes only merge
    within their own partition. Processes that fit nowhere wait in a queue
    and are started, in queue order, when a process stops.
    """

    def __init__(self, partitions: Iterable[int]) -> None:
        sizes = list(partitions)
        if not sizes:
            raise ValueError("at least one partition is expected")
        if any(size <= 0 for size in sizes):
            raise ValueError("partition sizes must be greater than zero")
        self.max_size = max(sizes)
        self.next_id = 0
        self._memory: list[Block] = [_reserved()]
        for size in sizes:
            self._memory += [Block(size), _reserved()]
        self._queue: list[Block] = []

    def _place(self, index: int, process: Block) -> bool:
        """Put process before the hole at index; return True if the hole survives."""
        hole = self._memory[index]
        hole.size -= process.size
        if hole.size > 0:
            self._memory.insert(index, process)
            return True
        self._memory[index] = process
        return False

    def create(self, name: str, size: int) -> bool:
        """Start a process, or queue it if no hole fits; return True if started."""
        if size <= 0:
            raise ValueError("process size must be greater than zero")
        if size > self.max_size:
            raise ValueError("Process Size is too large")
        process = Block(size, self.next_id, name[:NAME_LIMIT])
        self.next_id += 1
        candidates = [
            (block.size, index)
            for index, block in enumerate(self._memory)
            if block.is_free and block.size >= size
        ]
        if not candidates:
            self._queue.append(process)
            return False
        _, index = min(candidates)
        self._place(index, process)
        return True

    def stop(self, pid: int) -> list[Block]:
        """Stop or dequeue process pid; return the queued processes it let start."""
        if pid < 0:
            raise KeyError(pid)
        index = next(
            (i for i, block in enumerate(self._memory) if block.pid == pid), None
        )
        if index is None:
            waiting = next(
                (i for i, block in enumerate(self._queue) if block.pid == pid), None
            )
            if waiting is None:
                raise KeyError(pid)
            del self._queue[waiting]
            return []

        hole = self._memory[index]
        hole.pid = None
        hole.name = FREE_NAME
        before = self._memory[index - 1]
        if before.is_free:
            hole.size += before.size
            del self._memory[index - 1]
            index -= 1
        after = self._memory[index + 1]
        if after.is_free:
            hole.size += after.size
            del self._memory[index + 1]

        started: list[Block] = []
        for process in list(self._queue):
            if process.size <= hole.size:
                self._queue.remove(process)
                survives = self._place(index, process)
                index += 1
                started.append(replace(process))
                if not survives:
                    break
        return started

    def blocks(self) -> list[Block]:
        """Return a snapshot of memory from the lowest address up."""
        return [replace(block) for block in self._memory]

    def queued(self) -> list[Block]:
        """Return a snapshot of the waiting processes in queue order."""
        return [replace(block) for block in self._queue]


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Invalid Input!!!")


def _ask_text(prompt: str) -> str:
    text = input(prompt).strip()
    while not text:
        text = input().strip()
    return text


def _show(title: str, blocks: list[Block]) -> None:
    print(title)
    print("SL No.\tName\tID\tSize")
    serial = 0
    for block in blocks:
        if block.reserved:
            print("-" * 32)
            continue
        if block.is_free:
            print(f"{serial}\tFree\t\t{block.size}")
        else:
            print(f"{serial}\t{block.name}\t{block.pid}\t{block.size}")
        serial += 1


def _create(manager: MemoryManager) -> None:
    print("---Creating New Process---")
    name = _ask_text(">> Enter the process Name: ")[:NAME_LIMIT]
    size = _ask_int(">> Enter the process Size: ")
    pid = manager.next_id
    try:
        started = manager.create(name, size)
    except ValueError:
        print("Process Size is too large!!!")
        return
    print(f"Process created with ID {pid}")
    state = "Started" if started else "Queued"
    print(f"Process: {name},\tpID: {pid}\t\t[{state}]")


def _stop(manager: MemoryManager) -> None:
    pid = _ask_int(">> Enter the process id: ")
    running = {block.pid: block for block in manager.blocks() if block.pid is not None}
    waiting = {block.pid: block for block in manager.queued()}
    try:
        started = manager.stop(pid)
    except KeyError:
        print(f"No process found with ID {pid}")
        return
    if pid in running:
        print(f"Process: {running[pid].name},\tpID: {pid}\t\t[Stopped]")
    else:
        print(f"Process:{waiting[pid].name},\tpID: {pid}\t\t[Dequeued]")
    for process in started:
        print(f"Process: {process.name},\tpID: {process.pid}\t\t[Started]")


def main(argv: list[str] | None = None) -> int:
    """Set up partitions and run the process menu on standard input."""
    try:
        print("---Creating Memory Partitions---")
        total = _ask_int(">> Total Partitions count: ")
        if total <= 0:
            print("Terminating: Atleast 1 Partition is expected!!!")
            return 1
        sizes = []
        for i in range(total):
            size = _ask_int(f">> Partition {i} Size (KB): ")
            if size <= 0:
                print("Terminating: Expected size greater than zero!!!")
                return 1
            sizes.append(size)
        manager = MemoryManager(sizes)
        _show("---Current State of Memory---", manager.blocks())
        print(MENU)

        for turn in count():
            choice = _ask_int(">> ")
            if choice == 1:
                manager.next_id = turn
                _create(manager)
            elif choice == 2:
                _show("----Memory----", manager.blocks())
            elif choice == 3:
                _stop(manager)
            elif choice == 4:
                _show("---Queued Process---", manager.queued())
            elif choice == 5:
                print("Exiting...")
                return 0
            else:
                print("Invalid Input!!!")
    except EOFError:
        return 0
    return 0