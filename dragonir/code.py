"""Ordered sequences of IR instructions."""

from __future__ import annotations

from typing import Iterator

from dragonir.instruction import Instruction


class InterCode:
    """An ordered block of IR instructions."""

    def __init__(self) -> None:
        self.insts: list[Instruction] = []

    def add_inst(self, inst: Instruction) -> None:
        """Append one instruction."""
        self.insts.append(inst)

    def add_block(self, block: InterCode) -> None:
        """Move every instruction of ``block`` to the end of this one, leaving ``block`` empty."""
        if block is self:
            return
        self.insts.extend(block.insts)
        block.insts.clear()

    def clear(self) -> None:
        """Drop all instructions, detaching their operand edges first."""
        for inst in self.insts:
            inst.clear_operands()
        self.insts.clear()

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.insts)

    def __len__(self) -> int:
        return len(self.insts)