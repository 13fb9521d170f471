"""Arithmetic, comparison and boolean built-in operators for Kajisp."""

import math
import operator
from typing import Callable, List

from kajisp.kajisp_arguments import require_argument
from kajisp.kajisp_value import KajispValue, KajispNumber, KajispBoolean


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: dividing by zero gives an infinity or NaN rather than raising."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan

        return math.copysign(math.inf, left) * math.copysign(1.0, right)

    return left / right


def _remainder(left: float, right: float) -> float:
    """Truncated remainder (sign follows the dividend), NaN where it is undefined."""
    try:
        return math.fmod(left, right)

    except ValueError:
        return math.nan


class KajispMathFunctions:
    """Arithmetic, comparison and boolean built-in operators for Kajisp."""

    def get_functions(self) -> dict[str, Callable[[List[KajispValue]], KajispValue]]:
        """Return dictionary of operator implementations."""
        return {
            # Arithmetic operators
            '+': self._builtin_plus,
            '-': self._builtin_minus,
            '*': self._builtin_star,
            '/': self._builtin_slash,
            '%': self._builtin_percent,

            # Comparison operators
            '=': self._builtin_eq,
            '>': self._builtin_gt,
            '>=': self._builtin_gte,
            '<': self._builtin_lt,
            '<=': self._builtin_lte,

            # Boolean operators
            '&': self._builtin_and,
            '|': self._builtin_or,
            '!': self._builtin_not,
        }

    def _fold(self, args: List[KajispValue], operator_name: str, op: Callable[[float, float], float]) -> KajispValue:
        """Left fold over the number views of args, starting from the first argument."""
        result = require_argument(args, 0, operator_name).to_number()
        for arg in args[1:]:
            result = op(result, arg.to_number())

        return KajispNumber(result)

    # Arithmetic operations
    def _builtin_plus(self, args: List[KajispValue]) -> KajispValue:
        """Implement + operation."""
        return self._fold(args, '+', operator.add)

    def _builtin_minus(self, args: List[KajispValue]) -> KajispValue:
        """Implement - operation."""
        return self._fold(args, '-', operator.sub)

    def _builtin_star(self, args: List[KajispValue]) -> KajispValue:
        """Implement * operation."""
        return self._fold(args, '*', operator.mul)

    def _builtin_slash(self, args: List[KajispValue]) -> KajispValue:
        """Implement / operation."""
        return self._fold(args, '/', _divide)

    def _builtin_percent(self, args: List[KajispValue]) -> KajispValue:
        """Implement % operation."""
        return self._fold(args, '%', _remainder)

    # Comparison operations work on display text, not on numbers
    def _compare_chain(self, args: List[KajispValue], op: Callable[[str, str], bool]) -> KajispValue:
        """Check op holds for every adjacent pair of display texts."""
        texts = [arg.to_display() for arg in args]
        for i in range(len(texts) - 1):
            if not op(texts[i], texts[i + 1]):
                return KajispBoolean(False)

        return KajispBoolean(True)

    def _builtin_eq(self, args: List[KajispValue]) -> KajispValue:
        """Implement = (equality) operation."""
        texts = [arg.to_display() for arg in args]
        return KajispBoolean(all(text == texts[0] for text in texts[1:]))

    def _builtin_gt(self, args: List[KajispValue]) -> KajispValue:
        """Implement > (greater than) operation."""
        return self._compare_chain(args, operator.gt)

    def _builtin_gte(self, args: List[KajispValue]) -> KajispValue:
        """Implement >= (greater than or equal) operation."""
        return self._compare_chain(args, operator.ge)

    def _builtin_lt(self, args: List[KajispValue]) -> KajispValue:
        """Implement < (less than) operation."""
        return self._compare_chain(args, operator.lt)

    def _builtin_lte(self, args: List[KajispValue]) -> KajispValue:
        """Implement <= (less than or equal) operation."""
        return self._compare_chain(args, operator.le)

    # Boolean operations
    def _builtin_and(self, args: List[KajispValue]) -> KajispValue:
        """Implement & operation."""
        return KajispBoolean(all(arg.to_boolean() for arg in args))

    def _builtin_or(self, args: List[KajispValue]) -> KajispValue:
        """Implement | operation."""
        return KajispBoolean(any(arg.to_boolean() for arg in args))

    def _builtin_not(self, args: List[KajispValue]) -> KajispValue:
        """Implement ! operation."""
        return KajispBoolean(not require_argument(args, 0, '!').to_boolean())
