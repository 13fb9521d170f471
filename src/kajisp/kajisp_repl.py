#!/usr/bin/env python3
"""
Kajisp REPL - command-line shell for the Kajisp interpreter.

Reads one program per line, evaluates it and prints the display text of the
result.  Errors are reported and the loop carries on with the next line.

Usage:
    python -m kajisp [options]

Options:
    -e, --expression TEXT   Evaluate one program and exit
    --file PATH             Evaluate the program in PATH and exit
    --max-depth N           Maximum nesting depth (default: 200)
    --no-banner             Do not show the startup banner
    --no-color              Disable colored output
    --log-level LEVEL       Logging level (default: WARNING)
    --log-file PATH         Write logs to a rotating log file instead of stderr
    --help                  Show this help message
"""

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import List, Optional

from kajisp.kajisp import Kajisp
from kajisp.kajisp_error import KajispError, KajispExit


BANNER = "Kajisp - simple Lisp dialects"
PROMPT = "> "


class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[91m'

    @classmethod
    def disable(cls):
        """Disable colors (for non-terminal output)."""
        cls.RESET = ''
        cls.BOLD = ''
        cls.RED = ''


def setup_logging(level: str, log_file: Optional[str] = None) -> None:
    """Configure logging to stderr, or to a rotating log file when one is given."""
    handlers: List[logging.Handler]
    if log_file:
        # Keep up to 5 backups, max 1MB each
        handlers = [RotatingFileHandler(log_file, maxBytes=1024*1024, backupCount=5, encoding='utf-8')]

    else:
        handlers = [logging.StreamHandler(sys.stderr)]

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


class KajispRepl:
    """
    Interactive shell around the Kajisp interpreter.

    Runs in one of three modes: a single expression, a program file, or an
    interactive read-evaluate-print loop.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize the shell with command-line arguments.

        Args:
            args: Parsed command-line arguments
        """
        self.args = args
        self._logger = logging.getLogger("KajispRepl")

        # Errors go to stderr and everything else to stdout: both must be terminals for colors
        if not sys.stdout.isatty() or not sys.stderr.isatty() or args.no_color:
            Colors.disable()

        self.interpreter = Kajisp(max_depth=args.max_depth)

    def run(self) -> int:
        """
        Run the shell.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        try:
            if self.args.expression is not None:
                return self._run_once(self.args.expression)

            if self.args.file is not None:
                source = self._read_program_file(Path(self.args.file))
                if source is None:
                    return 1

                return self._run_once(source)

            return self._run_interactive()

        except KajispExit as e:
            self._logger.debug("program requested exit with code %d", e.exit_code)
            return e.exit_code

        except KeyboardInterrupt:
            self._print_error("\nInterrupted by user")
            return 130

    def _run_once(self, source: str) -> int:
        """Evaluate a single program, returning 0 on success and 1 on failure."""
        return 0 if self._evaluate_and_print(source.strip()) else 1

    def _run_interactive(self) -> int:
        """Read, evaluate and print programs until end of input."""
        if not self.args.no_banner:
            print(f"{Colors.BOLD}{BANNER}{Colors.RESET}")

        while True:
            try:
                line = input(PROMPT)

            except EOFError:
                print()
                return 0

            source = line.strip()
            if not source:
                continue

            self._evaluate_and_print(source)

    def _evaluate_and_print(self, source: str) -> bool:
        """Evaluate one program and print its result or its error."""
        try:
            result = self.interpreter.evaluate_and_format(source)

        except KajispError as e:
            self._logger.debug("evaluation failed: %s", e.message)
            print(f"{Colors.RED}{e}{Colors.RESET}", file=sys.stderr)
            return False

        print(result)
        return True

    def _read_program_file(self, path: Path) -> Optional[str]:
        """Read a program file."""
        try:
            return path.read_text(encoding='utf-8')

        except OSError as e:
            self._print_error(f"Failed to read program file: {e}")
            return None

    def _print_error(self, message: str) -> None:
        """Print error message."""
        print(f"{Colors.RED}Error:{Colors.RESET} {message}", file=sys.stderr)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Kajisp - simple Lisp dialects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive shell
  python -m kajisp

  # Evaluate one program
  python -m kajisp -e '(+ 1 2 3)'

  # Evaluate a program file
  python -m kajisp --file program.kjs
        """
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '-e', '--expression',
        help='Evaluate one program and exit'
    )

    source.add_argument(
        '--file',
        help='Evaluate the program in this file and exit'
    )

    parser.add_argument(
        '--max-depth',
        type=int,
        default=200,
        help='Maximum nesting depth (default: 200)'
    )

    parser.add_argument(
        '--no-banner',
        action='store_true',
        help='Do not show the startup banner'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )

    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: WARNING)'
    )

    parser.add_argument(
        '--log-file',
        help='Write logs to a rotating log file instead of stderr'
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    setup_logging(args.log_level, args.log_file)
    repl = KajispRepl(args)
    return repl.run()


if __name__ == "__main__":
    sys.exit(main())
