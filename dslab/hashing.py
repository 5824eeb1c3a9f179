"""Open-addressing hash table keyed by digit sums, plus an interactive menu."""

from __future__ import annotations

MENU = (
    "Menu:\n"
    "    1. Value Input\n"
    "    2. Get Value\n"
    "    3. Remove Key\n"
    "    4. Exit"
)


class TableFullError(Exception):
    """Raised when no free slot is left for a new key."""


class HashTable:
    """A fixed-size table of non-zero integer keys and non-zero values.

    A key's home slot is the sum of its digits in base ``size``, taken
    modulo ``size``; collisions probe linearly. A value of 0 marks a free
    slot, so neither keys nor values may be 0.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        self._size = size
        self._keys = [0] * size
        self._values = [0] * size

    def _home(self, key: int) -> int:
        remaining, total = abs(key), 0
        while remaining:
            remaining, digit = divmod(remaining, self._size)
            total += digit
        return total % self._size

    def slot(self, key: int) -> int:
        """Return the slot that holds key, or the free slot it would take."""
        if key == 0:
            raise ValueError("key must not be 0")
        home = self._home(key)
        index = home
        while self._values[index] != 0:
            if self._keys[index] == key:
                return index
            index = (index + 1) % self._size
            if index == home:
                raise TableFullError("hash table is full")
        return index

    def put(self, key: int, value: int) -> int:
        """Store value under key and return the slot used."""
        if value == 0:
            raise ValueError("value must not be 0")
        index = self.slot(key)
        self._keys[index] = key
        self._values[index] = value
        return index

    def _occupied_slot(self, key: int) -> int:
        try:
            index = self.slot(key)
        except (ValueError, TableFullError):
            raise KeyError(key) from None
        if self._values[index] == 0:
            raise KeyError(key)
        return index

    def get(self, key: int) -> int:
        """Return the value stored under key."""
        return self._values[self._occupied_slot(key)]

    def delete(self, key: int) -> None:
        """Remove key from the table."""
        self._values[self._occupied_slot(key)] = 0


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Invalid Input!!!")


def main(argv: list[str] | None = None) -> int:
    """Run the hash table menu on standard input; argv is unused."""
    table = HashTable()
    print(MENU)
    try:
        while True:
            choice = _ask_int(">> ")
            if choice == 1:
                key = _ask_int("Enter the key: ")
                value = _ask_int("Enter the value: ")
                try:
                    print(f"Log: Generated index is {table.put(key, value)}")
                except (ValueError, TableFullError):
                    print("Looks like hash table is full or key maybe 0!!!")
            elif choice == 2:
                key = _ask_int("Enter the key: ")
                try:
                    print(f"The value is {table.get(key)}")
                except KeyError:
                    print("Hash key not found!!!")
            elif choice == 3:
                key = _ask_int("Enter the key: ")
                try:
                    table.delete(key)
                    print("Hash key removed")
                except KeyError:
                    print("Hash key not found!!!")
            elif choice == 4:
                print("Exiting...")
                return 0
            else:
                print("Invalid Input!!!")
                continue
            print("Keys:" + "".join(f"\t{key}" for key in table._keys))
            print("Values:" + "".join(f"\t{value}" for value in table._values))
    except EOFError:
        return 0