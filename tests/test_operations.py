import logging

import pytest

from dragonir.instruction import IRInstOperator
from dragonir.operations import (
    ArgInstruction,
    BinaryInstruction,
    FuncCallInstruction,
    MoveInstruction,
)
from dragonir.types import ArrayType, IntegerType, PointerType, VoidType
from dragonir.values import LocalVariable, Value


class _FakeFunction:
    def __init__(self):
        self.real_arg_count = 0

    def real_arg_count_inc(self):
        self.real_arg_count += 1

    def real_arg_count_reset(self):
        self.real_arg_count = 0


class _RegValue(Value):
    def __init__(self, type, reg):
        super().__init__(type)
        self._reg = reg

    def reg_id(self):
        return self._reg


def _named(value, ir_name):
    value.ir_name = ir_name
    return value


def _int_var(ir_name):
    return _named(LocalVariable(IntegerType.get_int(), "x"), ir_name)


def _callee(name, ir_name):
    return _named(Value(VoidType.get(), name), ir_name)


def test_binary_add_text_and_operands():
    func = _FakeFunction()
    a, b = _int_var("%l0"), _int_var("%l1")
    inst = _named(
        BinaryInstruction(func, IRInstOperator.ADD_I, a, b, IntegerType.get_int()), "%t2"
    )
    assert inst.to_ir() == "%t2 = add %l0,%l1"
    assert inst.operand_values() == [a, b]
    assert a.uses[0].user is inst
    assert inst.has_result_value()


@pytest.mark.parametrize(
    "op, mnemonic",
    [
        (IRInstOperator.SUB_I, "sub"),
        (IRInstOperator.MUL_I, "mul"),
        (IRInstOperator.DIV_I, "div"),
        (IRInstOperator.MOD_I, "mod"),
        (IRInstOperator.EQ_I, "icmp eq"),
        (IRInstOperator.NE_I, "icmp ne"),
        (IRInstOperator.LE_I, "icmp le"),
        (IRInstOperator.LT_I, "icmp lt"),
        (IRInstOperator.GE_I, "icmp ge"),
        (IRInstOperator.GT_I, "icmp gt"),
    ],
)
def test_binary_mnemonics(op, mnemonic):
    inst = _named(
        BinaryInstruction(None, op, _int_var("%l0"), _int_var("%l1"), IntegerType.get_bool()),
        "%t9",
    )
    assert inst.to_ir() == f"%t9 = {mnemonic} %l0,%l1"


def test_binary_neg_has_single_operand():
    a = _int_var("%l0")
    inst = _named(
        BinaryInstruction(None, IRInstOperator.NEG_I, a, None, IntegerType.get_int()), "%t1"
    )
    assert len(inst.operands) == 1
    assert inst.to_ir() == "%t1 = neg %l0"


def test_binary_unknown_operator():
    inst = BinaryInstruction(
        None, IRInstOperator.CMP_I, _int_var("%l0"), _int_var("%l1"), IntegerType.get_int()
    )
    assert inst.to_ir() == "Unknown IR Instruction"


def test_arg_plain_counts_on_function():
    func = _FakeFunction()
    inst = ArgInstruction(func, _int_var("%t0"))
    assert inst.op is IRInstOperator.ARG
    assert not inst.has_result_value()
    assert inst.to_ir() == "arg %t0"
    assert func.real_arg_count == 1
    inst.to_ir()
    assert func.real_arg_count == 2


def test_arg_with_register():
    func = _FakeFunction()
    src = _named(_RegValue(IntegerType.get_int(), 3), "%t0")
    assert ArgInstruction(func, src).to_ir() == "arg %t0 ; 3"


def test_arg_with_memory_address():
    func = _FakeFunction()
    src = _named(
        BinaryInstruction(func, IRInstOperator.ADD_I, _int_var("%l0"), _int_var("%l1"),
                          IntegerType.get_int()),
        "%t1",
    )
    src.set_memory_addr(11, -8)
    assert ArgInstruction(func, src).to_ir() == "arg %t1 ; 11[-8]"


def test_call_void_with_int_args():
    func = _FakeFunction()
    call = FuncCallInstruction(
        func, _callee("f", "@f"), [_int_var("%l0"), _int_var("%l1")], VoidType.get()
    )
    assert call.to_ir() == "call void @f(i32 %l0, i32 %l1)"
    assert call.called_name() == "f"
    assert call.name == "f"


def test_call_with_result():
    func = _FakeFunction()
    call = _named(
        FuncCallInstruction(func, _callee("g", "@g"), [_int_var("%l0")], IntegerType.get_int()),
        "%t3",
    )
    assert call.has_result_value()
    assert call.to_ir() == "%t3 = call i32 @g(i32 %l0)"


def test_call_array_and_pointer_arguments():
    func = _FakeFunction()
    int_t = IntegerType.get_int()
    arr = _named(LocalVariable(ArrayType(ArrayType(int_t, 3), 2), "a"), "%l0")
    ptr_arr = _named(Value(PointerType.get(ArrayType(int_t, 4))), "%t0")
    ptr_int = _named(Value(PointerType.get(int_t)), "%t1")
    call = FuncCallInstruction(func, _callee("h", "@h"), [arr, ptr_arr, ptr_int], VoidType.get())
    assert call.to_ir() == "call void @h(i32 %l0[2][3], i32 %t0[4], i32* %t1)"


def test_call_after_args_omits_list_and_resets_counter():
    func = _FakeFunction()
    a = _int_var("%l0")
    ArgInstruction(func, a).to_ir()
    call = FuncCallInstruction(func, _callee("f", "@f"), [a], VoidType.get())
    assert call.to_ir() == "call void @f()"
    assert func.real_arg_count == 0


def test_call_arg_mismatch_is_logged(caplog):
    func = _FakeFunction()
    func.real_arg_count = 2
    call = FuncCallInstruction(func, _callee("f", "@f"), [_int_var("%l0")], VoidType.get())
    with caplog.at_level(logging.ERROR, logger="dragonir.operations"):
        text = call.to_ir()
    assert text == "call void @f()"
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_move_assign():
    dst, src = _int_var("%l0"), _int_var("%l1")
    inst = MoveInstruction(None, dst, src)
    assert inst.op is IRInstOperator.ASSIGN
    assert not inst.has_result_value()
    assert inst.to_ir() == "%l0 = %l1"


def test_move_store_through_pointer():
    addr = _named(Value(PointerType.get(IntegerType.get_int())), "%t0")
    inst = MoveInstruction(None, addr, _int_var("%l1"))
    assert inst.op is IRInstOperator.STORE
    assert inst.to_ir() == "*%t0 = %l1"


def test_move_load():
    int_t = IntegerType.get_int()
    addr = _named(Value(PointerType.get(int_t)), "%t0")
    inst = _named(MoveInstruction.load(None, addr), "%t1")
    assert inst.op is IRInstOperator.LOAD
    assert inst.type is int_t
    assert inst.get_operand(0) is inst
    assert inst.get_operand(1) is addr
    assert inst.to_ir() == "%t1 = *%t0"


def test_move_load_requires_pointer():
    with pytest.raises(TypeError):
        MoveInstruction.load(None, _int_var("%l0"))