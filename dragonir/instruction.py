"""IR instructions: the common base class and the control-flow instructions."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from dragonir.types import Type, VoidType
from dragonir.values import User, Value

if TYPE_CHECKING:
    from dragonir.function import Function


class IRInstOperator(Enum):
    """Operation codes of IR instructions."""

    ENTRY = auto()
    EXIT = auto()
    LABEL = auto()
    GOTO = auto()
    ADD_I = auto()
    SUB_I = auto()
    ASSIGN = auto()
    FUNC_CALL = auto()
    ARG = auto()
    NEG_I = auto()
    MUL_I = auto()
    DIV_I = auto()
    MOD_I = auto()
    EQ_I = auto()
    NE_I = auto()
    LE_I = auto()
    LT_I = auto()
    GE_I = auto()
    GT_I = auto()
    BRANCH = auto()
    CMP_I = auto()
    STORE = auto()
    LOAD = auto()
    MAX = auto()


class Instruction(User):
    """Base class of IR instructions; an instruction is also the value it computes."""

    def __init__(self, func: Optional[Function], op: IRInstOperator, type: Type) -> None:
        super().__init__(type)
        self.op = op
        self.func = func
        self.dead = False
        self._reg_id = -1
        self.offset = 0
        self.base_reg_no = -1
        self.base_reg_name = ""
        self.load_reg_no = -1

    def to_ir(self) -> str:
        """Text form of the instruction."""
        return "Unknown IR Instruction"

    def has_result_value(self) -> bool:
        """True when the instruction produces a value."""
        return not self.type.is_void_type()

    def reg_id(self) -> int:
        return self._reg_id

    def memory_addr(self) -> Optional[tuple[int, int]]:
        """Base register and offset when the result lives in memory, else None."""
        if self.base_reg_no == -1:
            return None
        return self.base_reg_no, self.offset

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the result in memory at ``offset`` from base register ``reg_id``."""
        self.base_reg_no = reg_id
        self.offset = offset

    def load_reg_id(self) -> int:
        return self.load_reg_no

    def set_load_reg_id(self, reg_id: int) -> None:
        self.load_reg_no = reg_id


class LabelInstruction(Instruction):
    """A jump target."""

    def __init__(self, func: Optional[Function]) -> None:
        super().__init__(func, IRInstOperator.LABEL, VoidType.get())

    def to_ir(self) -> str:
        return f"{self.ir_name}:"


class EntryInstruction(Instruction):
    """Function entry: stack allocation and register saving."""

    def __init__(self, func: Optional[Function]) -> None:
        super().__init__(func, IRInstOperator.ENTRY, VoidType.get())

    def to_ir(self) -> str:
        return "entry"


class ExitInstruction(Instruction):
    """Function exit, optionally returning a value."""

    def __init__(self, func: Optional[Function], result: Optional[Value] = None) -> None:
        super().__init__(func, IRInstOperator.EXIT, VoidType.get())
        if result is not None:
            self.add_operand(result)

    def to_ir(self) -> str:
        result = self.get_operand(0)
        if result is None:
            return "exit"
        return f"exit {result.ir_name}"


class GotoInstruction(Instruction):
    """Unconditional jump to a label."""

    def __init__(self, func: Optional[Function], target: LabelInstruction) -> None:
        super().__init__(func, IRInstOperator.GOTO, VoidType.get())
        self.target = target

    def to_ir(self) -> str:
        return f"br label {self.target.ir_name}"


class BranchInstruction(Instruction):
    """Conditional jump to one of two labels."""

    def __init__(
        self,
        func: Optional[Function],
        condition: Optional[Value],
        true_target: Optional[LabelInstruction],
        false_target: Optional[LabelInstruction],
    ) -> None:
        super().__init__(func, IRInstOperator.BRANCH, VoidType.get())
        self.condition = condition
        self.true_target = true_target
        self.false_target = false_target
        if condition is not None:
            self.add_operand(condition)

    def to_ir(self) -> str:
        cond = self.condition.ir_name if self.condition is not None else "<null_cond>"
        true_label = (
            self.true_target.ir_name if self.true_target is not None else "<null_true_label>"
        )
        false_label = (
            self.false_target.ir_name if self.false_target is not None else "<null_false_label>"
        )
        return f"bc {cond}, label {true_label}, label {false_label}"