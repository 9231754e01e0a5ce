"""Functions: parameters, local variables, instruction code and text output."""

from __future__ import annotations

from typing import Optional

from dragonir.code import InterCode
from dragonir.instruction import Instruction, IRInstOperator
from dragonir.types import ArrayType, FunctionType, PointerType, Type
from dragonir.values import FormalParam, LocalVariable, MemVariable, Value

TEMP_VARNAME_PREFIX = "%t"
LOCAL_VARNAME_PREFIX = "%l"
LABEL_PREFIX = ".L"


def _array_decl(type: ArrayType, ir_name: str) -> str:
    base, dims = type.base_and_dims()
    return f"{base} {ir_name}" + "".join(f"[{d}]" for d in dims)


class Function(Value):
    """A function definition (or a built-in declaration) with its IR code."""

    def __init__(self, name: str, type: FunctionType, builtin: bool = False) -> None:
        super().__init__(type, name)
        self.ir_name = f"@{name}"
        self.builtin = builtin
        self.return_type: Type = type.return_type
        self.alignment = 1
        self.params: list[FormalParam] = []
        self.code = InterCode()
        self.vars: list[LocalVariable] = []
        self.mem_vars: list[MemVariable] = []
        self.exit_label: Optional[Instruction] = None
        self.return_value: Optional[LocalVariable] = None
        self.max_depth = 0
        self.max_extra_stack_size = 0
        self.func_call_exist = False
        self.max_func_call_arg_cnt = 0
        self.relocated = False
        self.protected_regs: list[int] = []
        self.protected_reg_str = ""
        self.real_arg_count = 0

    def is_function(self) -> bool:
        return True

    def to_ir(self) -> str:
        """Text form of the whole function; built-in functions produce nothing."""
        if self.builtin:
            return ""

        params = []
        for param in self.params:
            if isinstance(param.type, ArrayType):
                params.append(_array_decl(param.type, param.ir_name))
            else:
                params.append(f"{param.type}{param.ir_name}")
        lines = [f"define {self.return_type} {self.ir_name}({', '.join(params)})", "{"]

        for var in self.vars:
            if isinstance(var.type, ArrayType):
                decl = _array_decl(var.type, var.ir_name)
            else:
                decl = f"{var.type} {var.ir_name}"
            line = f"\tdeclare {decl}"
            if var.name:
                line += f" ; {var.scope_level()}:{var.name}"
            lines.append(line)

        for inst in self.code:
            if not inst.has_result_value():
                continue
            var_type = inst.type
            if isinstance(var_type, ArrayType):
                decl = _array_decl(var_type, inst.ir_name)
            elif isinstance(var_type, PointerType) and isinstance(var_type.pointee_type, ArrayType):
                decl = _array_decl(var_type.pointee_type, inst.ir_name)
            else:
                decl = f"{var_type} {inst.ir_name}"
            lines.append(f"\tdeclare {decl}")

        for inst in self.code:
            text = inst.to_ir()
            if not text:
                continue
            if inst.op is IRInstOperator.LABEL:
                lines.append(text)
            else:
                lines.append(f"\t{text}")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def new_local_var(self, type: Type, name: str = "", scope_level: int = 1) -> LocalVariable:
        """Create a local variable and record it; names may repeat."""
        var = LocalVariable(type, name, scope_level)
        self.vars.append(var)
        return var

    def new_local_array(self, type: Type, name: str = "", scope_level: int = 1) -> LocalVariable:
        """Create a local array variable and record it."""
        return self.new_local_var(type, name, scope_level)

    def new_mem_variable(self, type: Type) -> MemVariable:
        """Create an anonymous memory value owned by the function."""
        mem = MemVariable(type)
        self.mem_vars.append(mem)
        return mem

    def set_max_depth(self, depth: int) -> None:
        """Set the stack frame depth and mark the frame as relocated."""
        self.max_depth = depth
        self.relocated = True

    def clear(self) -> None:
        """Release the instructions and local variables."""
        self.code.clear()
        self.vars.clear()

    def rename_ir(self) -> None:
        """Give parameters, locals, labels and result-producing instructions IR names."""
        if self.builtin:
            return
        name_index = 0
        label_index = 0
        for param in self.params:
            param.ir_name = f"{TEMP_VARNAME_PREFIX}{name_index}"
            name_index += 1
        for var in self.vars:
            var.ir_name = f"{LOCAL_VARNAME_PREFIX}{name_index}"
            name_index += 1
        for inst in self.code:
            if inst.op is IRInstOperator.LABEL:
                inst.ir_name = f"{LABEL_PREFIX}{label_index}"
                label_index += 1
            elif inst.has_result_value():
                inst.ir_name = f"{TEMP_VARNAME_PREFIX}{name_index}"
                name_index += 1

    def real_arg_count_inc(self) -> None:
        """Count one more ARG instruction."""
        self.real_arg_count += 1

    def real_arg_count_reset(self) -> None:
        """Reset the ARG instruction count."""
        self.real_arg_count = 0