"""Evaluator for Kajisp value trees with detailed error messages."""

import logging
from typing import Callable, List, TextIO

from kajisp.kajisp_arguments import require_argument
from kajisp.kajisp_error import KajispError, KajispEvalError, KajispExit, ErrorMessageBuilder
from kajisp.kajisp_math import KajispMathFunctions
from kajisp.kajisp_text import KajispTextFunctions
from kajisp.kajisp_value import KajispValue, KajispSymbol, KajispList, KajispNil


class KajispEvaluator:
    """
    Evaluates Kajisp value trees.

    Evaluation is strictly applicative: every element of a list, the head
    included, is evaluated left to right before the operator named by the
    head's display text is applied.  No operator ever sees unevaluated
    syntax, so both branches of an `if` are always evaluated.
    """

    # Head symbol of lists built by `symbol`; `eval` and `if` drop it
    SYMBOL_TAG = 'symbol'

    def __init__(self, max_depth: int = 200, output: TextIO | None = None, input_stream: TextIO | None = None):
        """
        Initialize evaluator.

        Args:
            max_depth: Maximum recursion depth
            output: Stream for print, println and input prompts (defaults to sys.stdout)
            input_stream: Stream read by input (defaults to sys.stdin)
        """
        self.max_depth = max_depth
        self.message_builder = ErrorMessageBuilder()
        self._logger = logging.getLogger("KajispEvaluator")

        # Create operator modules
        self.math_functions = KajispMathFunctions()
        self.text_functions = KajispTextFunctions(output, input_stream)

        self._builtin_functions = self._create_builtin_functions()

        # Control operators re-enter the evaluator, so they also receive the current depth
        self._control_functions: dict[str, Callable[[List[KajispValue], int], KajispValue]] = {
            'eval': self._builtin_eval,
            'if': self._builtin_if,
            'symbol': self._builtin_symbol,
            'exit': self._builtin_exit,
        }

    def _create_builtin_functions(self) -> dict[str, Callable[[List[KajispValue]], KajispValue]]:
        """Create all plain built-in operators."""
        builtins = {}
        builtins.update(self.math_functions.get_functions())
        builtins.update(self.text_functions.get_functions())
        return builtins

    def operator_names(self) -> List[str]:
        """Return the names of all operators."""
        return sorted([*self._builtin_functions, *self._control_functions])

    def evaluate(self, expr: KajispValue, depth: int = 0) -> KajispValue:
        """
        Recursively evaluate a value tree.

        Args:
            expr: Expression to evaluate
            depth: Current recursion depth

        Returns:
            Evaluation result

        Raises:
            KajispEvalError: If evaluation fails
            KajispExit: If the program calls `exit`
        """
        if depth > self.max_depth:
            raise KajispEvalError(
                message=f"Expression too deeply nested (max depth: {self.max_depth})",
                received=f"Expression: {self._truncate(expr.to_display())}",
                suggestion="Reduce nesting depth or increase max_depth limit"
            )

        try:
            return self._evaluate_expression(expr, depth)

        except KajispError:
            raise

        # Rendering expr here could overflow the stack again, so it is left out
        except RecursionError as e:
            raise KajispEvalError(
                message="Expression too deeply nested for the Python stack",
                context=f"Nesting limit max_depth={self.max_depth} is above what the interpreter stack can hold",
                suggestion="Reduce nesting depth or lower max_depth"
            ) from e

        except Exception as e:
            raise KajispEvalError(
                message=f"Unexpected error during evaluation: {e}",
                received=f"Expression: {self._truncate(expr.to_display())}",
                suggestion="This is an internal error - please report this issue"
            ) from e

    def _evaluate_expression(self, expr: KajispValue, depth: int) -> KajispValue:
        """Internal expression evaluation with type dispatch."""
        # Every atom evaluates to itself
        if not isinstance(expr, KajispList):
            return expr

        if expr.is_empty():
            return KajispNil()

        values = [self.evaluate(element, depth + 1) for element in expr.elements]
        operator_name = values[0].to_display()
        return self._apply_operator(operator_name, values[1:], depth)

    def _apply_operator(self, operator_name: str, args: List[KajispValue], depth: int) -> KajispValue:
        """Apply the operator called operator_name to already evaluated arguments."""
        self._logger.debug("applying '%s' to %d argument(s)", operator_name, len(args))

        control_function = self._control_functions.get(operator_name)
        if control_function is not None:
            return control_function(args, depth)

        builtin_function = self._builtin_functions.get(operator_name)
        if builtin_function is not None:
            return builtin_function(args)

        similar = self.message_builder.suggest_similar_operators(operator_name, self.operator_names())
        suggestion = f"Did you mean: {', '.join(similar)}?" if similar else "Check the operator name"
        raise KajispEvalError(
            message=f"Undefined operator: '{operator_name}'",
            received=f"Operator: {operator_name}",
            expected=f"One of: {' '.join(self.operator_names())}",
            suggestion=suggestion,
            example="(+ 1 2), (concat \"a\" \"b\"), (if true 1 2)"
        )

    def _evaluate_untagged(self, elements: tuple, depth: int) -> KajispValue:
        """Drop the first element (the tag) and evaluate the rest as a list."""
        return self.evaluate(KajispList(elements).drop(1), depth + 1)

    def _builtin_eval(self, args: List[KajispValue], depth: int) -> KajispValue:
        """Implement eval: re-evaluate tagged data as a program fragment."""
        return self._evaluate_untagged(require_argument(args, 0, 'eval').to_list(), depth)

    def _builtin_if(self, args: List[KajispValue], depth: int) -> KajispValue:
        """
        Implement if.

        The branches arrive already evaluated; `if` only selects one of them.
        A selected list (normally built with `symbol`) is untagged and
        evaluated, which is how a program defers work until a branch is taken.
        """
        if len(args) != 3:
            raise KajispEvalError(
                message=f"Operator 'if' requires exactly 3 arguments, got {len(args)}",
                received=f"{len(args)} argument{'' if len(args) == 1 else 's'}",
                expected="Condition, then-branch and else-branch",
                example=self.message_builder.create_operator_example('if')
            )

        condition, then_branch, else_branch = args
        selected = then_branch if condition.to_boolean() else else_branch
        if isinstance(selected, KajispList):
            return self._evaluate_untagged(selected.elements, depth)

        return selected

    def _builtin_symbol(self, args: List[KajispValue], _depth: int) -> KajispValue:
        """Implement symbol: tag evaluated arguments so `eval` can run them later."""
        return KajispList((KajispSymbol(self.SYMBOL_TAG), *args))

    def _builtin_exit(self, _args: List[KajispValue], _depth: int) -> KajispValue:
        """Implement exit: ask the host to terminate with status 0."""
        self._logger.debug("exit requested")
        raise KajispExit(0)

    def _truncate(self, text: str, length: int = 60) -> str:
        """Shorten text for error display."""
        return text if len(text) <= length else text[:length] + "..."
