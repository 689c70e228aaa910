from typing import Any
from typing import Type


class Stage:
    """
    Clocked pipeline register between two stages.

    ``clock()`` latches the new record, holds the current one (stall),
    or loads a bubble (kill). Kill wins over stall.
    """
    def __init__(self, name: str, layout: Type) -> None:
        if not callable(getattr(layout, 'bubble', None)):
            raise ValueError(f'{layout!r} does not define a bubble() constructor')

        self.name     = name
        self.layout   = layout
        self.endpoint = layout.bubble()

    def clock(self, data: Any, stall: bool = False, kill: bool = False) -> None:
        if kill:
            self.endpoint = self.layout.bubble()
        elif not stall:
            self.endpoint = data

    def reset(self) -> None:
        self.endpoint = self.layout.bubble()

    def __repr__(self) -> str:
        return f'Stage({self.name}: {self.endpoint})'
