"""Main Kajisp class: runs one program through tokenizer, parser and evaluator."""

from typing import Any, TextIO

from kajisp.kajisp_evaluator import KajispEvaluator
from kajisp.kajisp_parser import KajispParser
from kajisp.kajisp_value import KajispValue


class Kajisp:
    """
    Kajisp interpreter for a small LISP-like language.

    Each call evaluates one complete program.  Nothing is carried over
    between calls: the language has no bindings.
    """

    def __init__(self, max_depth: int = 200, output: TextIO | None = None, input_stream: TextIO | None = None):
        """
        Initialize the interpreter.

        Args:
            max_depth: Maximum nesting depth for parsing and evaluation
            output: Stream written by print, println and input prompts (defaults to sys.stdout)
            input_stream: Stream read by input (defaults to sys.stdin)
        """
        self.max_depth = max_depth
        self.output = output
        self.input_stream = input_stream

    def evaluate_value(self, source: str) -> KajispValue:
        """
        Evaluate a Kajisp program.

        Args:
            source: Program text

        Returns:
            The resulting Kajisp value

        Raises:
            KajispTokenError: If the program has unbalanced parentheses or quotes
            KajispParseError: If the program is empty or holds more than one expression
            KajispEvalError: If evaluation fails
            KajispExit: If the program calls `exit`
        """
        parser = KajispParser(source.strip(), max_depth=self.max_depth)
        parsed_expr = parser.parse()

        evaluator = KajispEvaluator(
            max_depth=self.max_depth,
            output=self.output,
            input_stream=self.input_stream
        )
        return evaluator.evaluate(parsed_expr)

    def evaluate(self, source: str) -> Any:
        """
        Evaluate a Kajisp program and convert the result to Python types.

        Numbers become float, booleans bool, symbols and strings str, lists
        list and nil None.
        """
        return self.evaluate_value(source).to_python()

    def evaluate_and_format(self, source: str) -> str:
        """Evaluate a Kajisp program and return the display text of the result."""
        return self.evaluate_value(source).to_display()
