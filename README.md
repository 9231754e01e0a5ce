# dragonir

`dragonir` builds a small linear intermediate representation for a C-like
language and prints it as text. It needs nothing outside the standard
library.

## What is in it

- `dragonir.types` holds the type classes. `VoidType.get()` and
  `LabelType.get()` return the shared void and label types.
  `IntegerType.get_bool()` returns the shared `i1` type and
  `IntegerType.get_int()` the shared `i32` type. `ArrayType(element, n)`
  describes an array, and you nest it for more dimensions.
  `ArrayType.base_and_dims()` splits a nested array into its base type and
  its list of dimensions. `PointerType.get(t)` returns one shared pointer
  type for each pointee, and records `root_type` and `depth` on it.
  `FunctionType(ret, args)` describes a signature. Every type has `size()`,
  which is 4 for integers, the element count times the element size for
  arrays, and -1 otherwise.
- `dragonir.values` holds `Value`, `User` and `Use`, which keep def–use
  edges consistent in both directions. Use `add_operand`, `set_operand`,
  `remove_operand`, `remove_operand_at` and `clear_operands` to change
  them. It also holds `LocalVariable`, `FormalParam` and `MemVariable`.
- `dragonir.instruction` holds the `IRInstOperator` opcodes and the
  `Instruction` base class. It also holds the control-flow instructions
  `LabelInstruction`, `EntryInstruction`, `ExitInstruction`,
  `GotoInstruction` and `BranchInstruction`.
- `dragonir.operations` holds four instructions:
  - `BinaryInstruction` covers `add`, `sub`, `mul`, `div`, `mod`, `neg`
    and the `icmp` comparisons.
  - `MoveInstruction` is an assignment. It becomes a store when its target
    has pointer type. `MoveInstruction.load(func, addr)` builds a load.
  - `ArgInstruction` is one call argument.
  - `FuncCallInstruction` is a call.
- `dragonir.code` holds `InterCode`, an ordered, iterable block of
  instructions. `add_block` moves another block's instructions to the end
  of this block and leaves that block empty.
- `dragonir.function` holds `Function`. A `Function` owns its formal
  parameters (`params`), its locals (`new_local_var`, `new_local_array`,
  `new_mem_variable`) and its `code`. `rename_ir()` names everything, and
  `to_ir()` returns the function's text.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dragonir.types import IntegerType, FunctionType
from dragonir.function import Function
from dragonir.instruction import (
    EntryInstruction, ExitInstruction, IRInstOperator, LabelInstruction,
)
from dragonir.operations import BinaryInstruction, MoveInstruction

i32 = IntegerType.get_int()
func = Function("main", FunctionType(i32, []), False)

a = func.new_local_var(i32, "a", 1)
ret = func.new_local_var(i32, "", 1)

code = func.code
code.add_inst(LabelInstruction(func))
code.add_inst(EntryInstruction(func))
add = BinaryInstruction(func, IRInstOperator.ADD_I, a, a, i32)
code.add_inst(add)
code.add_inst(MoveInstruction(func, ret, add))
code.add_inst(ExitInstruction(func, ret))

func.rename_ir()
print(func.to_ir())
```

prints

```
define i32 @main()
{
	declare i32 %l0 ; 1:a
	declare i32 %l1
	declare i32 %t2
.L0:
	entry
	%t2 = add %l0,%l0
	%l1 = %t2
	exit %l1
}
```

`rename_ir()` numbers names from a single counter across parameters,
locals and result-producing instructions:

- parameters get `%t` names;
- locals get `%l` names;
- result-producing instructions get `%t` names.

Labels are counted separately and get `.L` names. Call `rename_ir()` before
`to_ir()`. If you skip it, those names come out empty. The function itself
is named `@<name>` from the start.

Array variables are declared as their base type followed by their
dimensions, for example `i32 %l0[10][20]`. A built-in function
(`builtin=True`) is not renamed, and its `to_ir()` returns an empty string.

If a function's `real_arg_count` is zero, `FuncCallInstruction.to_ir()`
lists the call's arguments inline. Each call to `ArgInstruction.to_ir()`
adds one to that count, and `FuncCallInstruction.to_ir()` resets it to zero.

## What it does not do

This package is only the IR layer. It has no parser or front end for source
text. It has no step that lowers a syntax tree into IR. It has no module,
global variable or constant table, no target code generator or register
allocator, and no command-line program. You build the IR in Python yourself,
and `to_ir()` gives it back as a string for you to use or write out.