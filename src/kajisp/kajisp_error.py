"""Exception classes for Kajisp with detailed context."""

from typing import Optional
import difflib


class KajispError(Exception):
    """Base exception for Kajisp errors with detailed context information."""

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
        suggestion: Optional[str] = None,
        example: Optional[str] = None,
        position: Optional[int] = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
            position: Character position where error occurred
        """
        self.message = message
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example
        self.position = position

        super().__init__(self._format_detailed_message())

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.position is not None:
            parts.append(f"Position: {self.position}")

        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        if self.example:
            parts.append(f"Example: {self.example}")

        return "\n".join(parts)


class KajispTokenError(KajispError):
    """Tokenization (syntax) errors with detailed context."""


class KajispParseError(KajispError):
    """Parsing errors with detailed context."""


class KajispEvalError(KajispError):
    """Evaluation errors with detailed context."""


class KajispExit(SystemExit):
    """
    Raised by the `exit` operator to request termination of the host process.

    This is not a KajispError: a host that only handles KajispError lets it
    propagate and the process ends with the carried exit code.
    """

    def __init__(self, exit_code: int = 0):
        self.exit_code = exit_code
        super().__init__(exit_code)


class ErrorMessageBuilder:
    """Helper class for building detailed error messages."""

    @staticmethod
    def suggest_similar_operators(target: str, available_operators: list[str], max_suggestions: int = 3) -> list[str]:
        """Suggest similar operator names using fuzzy matching."""
        if not target or not available_operators:
            return []

        return difflib.get_close_matches(target, available_operators, n=max_suggestions, cutoff=0.6)

    @staticmethod
    def create_operator_example(operator_name: str) -> str:
        """Create usage example for an operator."""
        examples = {
            # Arithmetic
            '+': "(+ 1 2 3) → 6",
            '-': "(- 10 3) → 7",
            '*': "(* 2 3 4) → 24",
            '/': "(/ 12 3) → 4",
            '%': "(% 7 3) → 1",

            # Comparison
            '=': "(= 1 1 1) → true",
            '<': "(< 1 2 3) → true",
            '>': "(> 3 2 1) → true",
            '<=': "(<= 1 1 2) → true",
            '>=': "(>= 3 2 2) → true",

            # Boolean
            '&': "(& true true false) → false",
            '|': "(| false true) → true",
            '!': "(! true) → false",

            # Text and I/O
            'concat': "(concat \"a\" \"b\" 1) → \"ab1\"",
            'print': "(print \"hello\") → nil",
            'println': "(println \"hello\") → nil",
            'input': "(input \"name? \") → \"...\"",

            # Control
            'if': "(if (> 5 3) \"yes\" \"no\") → \"yes\"",
            'symbol': "(symbol + 1 2) → (symbol + 1 2)",
            'eval': "(eval (symbol + 1 2)) → 3",
            'exit': "(exit)",
        }

        return examples.get(operator_name, f"({operator_name} ...)")
