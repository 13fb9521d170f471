"""Text and console I/O built-in operators for Kajisp."""

import logging
import sys
from typing import Callable, List, TextIO

from kajisp.kajisp_arguments import require_argument
from kajisp.kajisp_value import KajispValue, KajispString, KajispNil


class KajispTextFunctions:
    """
    Text and console I/O built-in operators for Kajisp.

    Output goes to the output stream and is flushed immediately, so prompts
    appear before `input` blocks on the input stream.
    """

    def __init__(self, output: TextIO | None = None, input_stream: TextIO | None = None) -> None:
        """
        Initialize the text operators.

        Args:
            output: Stream written by print, println and input prompts (defaults to sys.stdout)
            input_stream: Stream read by input (defaults to sys.stdin)
        """
        self._output = output
        self._input_stream = input_stream
        self._logger = logging.getLogger("KajispTextFunctions")

    @property
    def output(self) -> TextIO:
        """Output stream, resolved at call time so redirected sys.stdout is honoured."""
        return self._output if self._output is not None else sys.stdout

    @property
    def input_stream(self) -> TextIO:
        """Input stream, resolved at call time so redirected sys.stdin is honoured."""
        return self._input_stream if self._input_stream is not None else sys.stdin

    def get_functions(self) -> dict[str, Callable[[List[KajispValue]], KajispValue]]:
        """Return dictionary of operator implementations."""
        return {
            'concat': self._builtin_concat,
            'print': self._builtin_print,
            'println': self._builtin_println,
            'input': self._builtin_input,
        }

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _builtin_concat(self, args: List[KajispValue]) -> KajispValue:
        """Implement concat operation."""
        return KajispString(''.join(arg.to_text() for arg in args))

    def _builtin_print(self, args: List[KajispValue]) -> KajispValue:
        """Implement print operation."""
        self._write(require_argument(args, 0, 'print').to_text())
        return KajispNil()

    def _builtin_println(self, args: List[KajispValue]) -> KajispValue:
        """Implement println operation."""
        self._write(require_argument(args, 0, 'println').to_text() + "\n")
        return KajispNil()

    def _builtin_input(self, args: List[KajispValue]) -> KajispValue:
        """Implement input operation: show a prompt, then read and trim one line."""
        self._write(require_argument(args, 0, 'input').to_text())
        line = self.input_stream.readline()
        if not line:
            self._logger.debug("input reached end of stream")

        return KajispString(line.strip())
