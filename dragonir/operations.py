"""IR instructions that compute or move values: arguments, arithmetic, calls, copies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from dragonir.instruction import Instruction, IRInstOperator
from dragonir.types import ArrayType, PointerType, Type, VoidType
from dragonir.values import Value

if TYPE_CHECKING:
    from dragonir.function import Function

logger = logging.getLogger(__name__)

_BINARY_MNEMONICS: dict[IRInstOperator, str] = {
    IRInstOperator.ADD_I: "add",
    IRInstOperator.SUB_I: "sub",
    IRInstOperator.MUL_I: "mul",
    IRInstOperator.DIV_I: "div",
    IRInstOperator.MOD_I: "mod",
    IRInstOperator.EQ_I: "icmp eq",
    IRInstOperator.NE_I: "icmp ne",
    IRInstOperator.LE_I: "icmp le",
    IRInstOperator.LT_I: "icmp lt",
    IRInstOperator.GE_I: "icmp ge",
    IRInstOperator.GT_I: "icmp gt",
}


class ArgInstruction(Instruction):
    """Passes one actual argument ahead of a function call."""

    def __init__(self, func: Function, src: Value) -> None:
        super().__init__(func, IRInstOperator.ARG, VoidType.get())
        self.add_operand(src)

    def to_ir(self) -> str:
        """Text form; also counts this ARG on the owning function."""
        src = self.get_operand(0)
        text = f"arg {src.ir_name}"
        reg = src.reg_id()
        if reg != -1:
            text += f" ; {reg}"
        else:
            addr = src.memory_addr()
            if addr is not None:
                base, offset = addr
                text += f" ; {base}[{offset}]"
        self.func.real_arg_count_inc()
        return text


class BinaryInstruction(Instruction):
    """Arithmetic, negation and integer comparison."""

    def __init__(
        self,
        func: Optional[Function],
        op: IRInstOperator,
        src1: Value,
        src2: Optional[Value],
        type: Type,
    ) -> None:
        super().__init__(func, op, type)
        self.add_operand(src1)
        self.add_operand(src2)

    def to_ir(self) -> str:
        src1 = self.get_operand(0)
        if self.op is IRInstOperator.NEG_I:
            return f"{self.ir_name} = neg {src1.ir_name}"
        mnemonic = _BINARY_MNEMONICS.get(self.op)
        if mnemonic is None:
            return super().to_ir()
        src2 = self.get_operand(1)
        return f"{self.ir_name} = {mnemonic} {src1.ir_name},{src2.ir_name}"


def _format_argument(operand: Value) -> str:
    var_type = operand.type
    if isinstance(var_type, ArrayType):
        base, dims = var_type.base_and_dims()
        return f"{base} {operand.ir_name}" + "".join(f"[{d}]" for d in dims)
    if isinstance(var_type, PointerType) and isinstance(var_type.pointee_type, ArrayType):
        base, dims = var_type.pointee_type.base_and_dims()
        return f"{base} {operand.ir_name}" + "".join(f"[{d}]" for d in dims)
    return f"{var_type} {operand.ir_name}"


class FuncCallInstruction(Instruction):
    """Call of a function with actual arguments; the instruction holds the result."""

    def __init__(
        self,
        func: Function,
        called_function: Value,
        args: Iterable[Value],
        type: Type,
    ) -> None:
        super().__init__(func, IRInstOperator.FUNC_CALL, type)
        self.called_function = called_function
        self.name = called_function.name
        for arg in args:
            self.add_operand(arg)

    def to_ir(self) -> str:
        """Text form; resets the owning function's ARG counter."""
        arg_count = self.func.real_arg_count
        operand_count = len(self.operands)
        if operand_count != arg_count and arg_count != 0:
            logger.error(
                "number of ARG instructions (%d) does not match the call's argument count (%d)",
                arg_count,
                operand_count,
            )

        if self.type.is_void_type():
            text = f"call void {self.called_function.ir_name}("
        else:
            text = f"{self.ir_name} = call i32 {self.called_function.ir_name}("

        if arg_count == 0:
            text += ", ".join(_format_argument(v) for v in self.operand_values())

        text += ")"
        self.func.real_arg_count_reset()
        return text

    def called_name(self) -> str:
        """Name of the function being called."""
        return self.called_function.name


class MoveInstruction(Instruction):
    """Copy between values: plain assignment, store through a pointer, or load."""

    def __init__(self, func: Optional[Function], result: Value, src: Value) -> None:
        super().__init__(func, IRInstOperator.ASSIGN, VoidType.get())
        self.add_operand(result)
        self.add_operand(src)
        if result.type.is_pointer_type():
            self.op = IRInstOperator.STORE

    @classmethod
    def load(cls, func: Optional[Function], src_addr: Value) -> MoveInstruction:
        """A load from ``src_addr``; the instruction itself holds the loaded value."""
        addr_type = src_addr.type
        if not isinstance(addr_type, PointerType):
            raise TypeError(f"cannot load through a value of type {addr_type}")
        inst = cls.__new__(cls)
        Instruction.__init__(inst, func, IRInstOperator.LOAD, addr_type.pointee_type)
        inst.add_operand(inst)
        inst.add_operand(src_addr)
        return inst

    def to_ir(self) -> str:
        result = self.get_operand(0)
        src = self.get_operand(1)
        if self.op is IRInstOperator.STORE:
            return f"*{result.ir_name} = {src.ir_name}"
        if self.op is IRInstOperator.LOAD:
            return f"{result.ir_name} = *{src.ir_name}"
        if self.op is IRInstOperator.ASSIGN:
            return f"{result.ir_name} = {src.ir_name}"
        return super().to_ir()