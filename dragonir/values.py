"""Values, their users, and the define-use edges that connect them."""

from __future__ import annotations

from typing import Optional

from dragonir.types import Type


class Use:
    """A define-use edge: ``usee`` is the value defined, ``user`` consumes it.

    Creating a Use does not register it with either end; the caller does that.
    """

    def __init__(self, usee: Value, user: User) -> None:
        self.usee = usee
        self.user = user

    def set_usee(self, value: Value) -> None:
        """Point this edge at another value, moving it between use lists."""
        if value is None:
            raise ValueError("a use must refer to a value")
        self.usee.remove_use(self)
        self.usee = value
        value.add_use(self)

    def remove(self) -> None:
        """Detach the edge from both its value and its user."""
        self.usee.remove_use(self)
        self.user.remove_operand_raw(self)

    def __repr__(self) -> str:
        return f"<Use {self.usee!r} by {self.user!r}>"


class Value:
    """Anything that carries a type: variables, constants, functions, instructions."""

    def __init__(self, type: Type, name: str = "") -> None:
        self.type = type
        self.name = name
        self.ir_name = ""
        self.uses: list[Use] = []
        self._base_reg_no = -1
        self._mem_offset = 0
        self._load_reg_no = -1

    def add_use(self, use: Use) -> None:
        """Record one more edge using this value."""
        self.uses.append(use)

    def remove_use(self, use: Use) -> None:
        """Forget an edge using this value, if it is recorded."""
        for index, existing in enumerate(self.uses):
            if existing is use:
                del self.uses[index]
                return

    def scope_level(self) -> int:
        """Scope nesting level of the value; -1 when it has none."""
        return -1

    def reg_id(self) -> int:
        """Register allocated to the value; -1 when there is none."""
        return -1

    def memory_addr(self) -> Optional[tuple[int, int]]:
        """Base register and offset of a value held in memory, or None."""
        if self._base_reg_no == -1:
            return None
        return self._base_reg_no, self._mem_offset

    def load_reg_id(self) -> int:
        """Register used to load the value; -1 when there is none."""
        return self._load_reg_no

    def set_load_reg_id(self, reg_id: int) -> None:
        """Record the register used to load the value."""
        self._load_reg_no = reg_id

    def __repr__(self) -> str:
        label = self.ir_name or self.name or "?"
        return f"<{type(self).__name__} {label}: {self.type}>"


class User(Value):
    """A value computed from operand values, each reached through a Use."""

    def __init__(self, type: Type, name: str = "") -> None:
        super().__init__(type, name)
        self.operands: list[Use] = []

    def operand_values(self) -> list[Value]:
        """The values referred to by the operands, in order."""
        return [use.usee for use in self.operands]

    def get_operand(self, pos: int) -> Optional[Value]:
        """Operand value at ``pos``, or None when there is no such operand."""
        if 0 <= pos < len(self.operands):
            return self.operands[pos].usee
        return None

    def set_operand(self, pos: int, value: Value) -> None:
        """Replace the value of the operand at ``pos``; out-of-range positions are ignored."""
        if 0 <= pos < len(self.operands):
            self.operands[pos].set_usee(value)

    def add_operand(self, value: Optional[Value]) -> Optional[Use]:
        """Append an operand and register the edge with the value; None is skipped."""
        if value is None:
            return None
        use = Use(value, self)
        self.operands.append(use)
        value.add_use(use)
        return use

    def remove_operand(self, value: Value) -> None:
        """Remove the first operand that refers to ``value``."""
        for use in self.operands:
            if use.usee is value:
                use.remove()
                return

    def remove_operand_at(self, pos: int) -> None:
        """Remove the operand at ``pos``, if there is one."""
        if 0 <= pos < len(self.operands):
            self.operands[pos].remove()

    def remove_operand_raw(self, use: Use) -> None:
        """Drop ``use`` from the operand list without touching its value."""
        for index, existing in enumerate(self.operands):
            if existing is use:
                del self.operands[index]
                return

    def remove_use(self, use: Use) -> None:
        """Detach ``use`` fully when it is one of this user's operands.

        Edges in which this user is the value being used are dropped
        from its own use list instead.
        """
        if any(existing is use for existing in self.operands):
            use.remove()
        else:
            super().remove_use(use)

    def clear_operands(self) -> None:
        """Remove every operand, detaching each edge from both ends."""
        while self.operands:
            self.operands[0].remove()


class LocalVariable(Value):
    """A named variable living inside a function, at some scope level."""

    def __init__(self, type: Type, name: str = "", scope_level: int = 1) -> None:
        super().__init__(type, name)
        self._scope_level = scope_level

    def scope_level(self) -> int:
        return self._scope_level


class FormalParam(Value):
    """A formal parameter of a function, through which an argument arrives."""

    def __init__(self, type: Type, name: str = "") -> None:
        super().__init__(type, name)


class MemVariable(Value):
    """An anonymous value held in memory."""

    def __init__(self, type: Type) -> None:
        super().__init__(type)