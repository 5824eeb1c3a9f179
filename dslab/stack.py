"""Fixed-capacity stack with an interactive menu."""

from __future__ import annotations

from collections.abc import Iterator

from dslab.singly import _ask_int

MENU = (
    "Menu:\n"
    "    1.Push\n"
    "    2.Pop\n"
    "    3.Display\n"
    "    4.Exit\n"
    "\nUse option number to select it"
)

_BAD_CHOICE = "Error: Invalid selection!!!"


class BoundedStack:
    """A LIFO stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put value on top of the stack."""
        if len(self._items) >= self.capacity:
            raise OverflowError("Stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("Stack underflow")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self.capacity})"


def main(argv: list[str] | None = None) -> int:
    """Run the push/pop/display menu on standard input; argv is unused."""
    stack = BoundedStack()
    print(MENU)
    try:
        while True:
            choice = _ask_int(">> ", _BAD_CHOICE)
            if choice == 1:
                if len(stack) >= stack.capacity:
                    print("Error: Stack overflow!!!")
                else:
                    stack.push(_ask_int("Enter the value to be pushed: ", _BAD_CHOICE))
            elif choice == 2:
                try:
                    print(f"The value poped is {stack.pop()}")
                except IndexError:
                    print("Error: Stack underflow!!!")
            elif choice == 3:
                print(*stack, sep="\n")
            elif choice == 4:
                return 0
            else:
                print(_BAD_CHOICE)
    except EOFError:
        return 0