"""Tokenizer for Kajisp source text with detailed error messages."""

from typing import List

from kajisp.kajisp_error import KajispTokenError
from kajisp.kajisp_token import KajispToken


class KajispTokenizer:
    """
    Splits Kajisp source text into a flat list of tokens.

    Only the outermost level is split: a parenthesized group comes back as a
    single token (parentheses included) and is tokenized again by the parser
    when it reads the group.
    """

    # Full-width (ideographic) space separates tokens too
    WHITESPACE = frozenset(' \t\n\r　')

    def tokenize(self, source: str, offset: int = 0) -> List[KajispToken]:
        """
        Tokenize source text.

        Args:
            source: The text to tokenize
            offset: Position of source[0] within the original program, used for error reporting

        Returns:
            List of tokens

        Raises:
            KajispTokenError: If parentheses or quotes are unbalanced
        """
        tokens: List[KajispToken] = []
        current: List[str] = []
        start = 0
        depth = 0
        quoting = False
        quote_start = 0
        group_start = 0

        def flush() -> None:
            if current:
                tokens.append(KajispToken(''.join(current), offset + start))
                current.clear()

        for i, char in enumerate(source):
            if char == '(' and not quoting:
                if depth == 0:
                    flush()
                    group_start = i

                depth += 1

            elif char == ')' and not quoting:
                if depth == 0:
                    raise KajispTokenError(
                        message="Unmatched closing parenthesis",
                        position=offset + i,
                        received=f"Text: {self._snippet(source, i)}",
                        expected="Every ')' to close an earlier '('",
                        example="Correct: (+ 1 2)\nIncorrect: + 1 2)",
                        suggestion="Remove the extra ')' or add the missing '('",
                        context="Found ')' with no open parenthesis group"
                    )

                current.append(char)
                depth -= 1
                if depth == 0:
                    flush()

                continue

            elif char == '"' and depth == 0:
                if not quoting:
                    flush()
                    quoting = True
                    quote_start = i

                else:
                    current.append(char)
                    quoting = False
                    flush()
                    continue

            elif char in self.WHITESPACE and depth == 0 and not quoting:
                flush()
                continue

            if not current:
                start = i

            current.append(char)

        if quoting:
            raise KajispTokenError(
                message="Unterminated string literal",
                position=offset + quote_start,
                received=f"String starting with: {self._snippet(source, quote_start)}",
                expected="Closing quote \" at end of string",
                example='Correct: "hello world"\nIncorrect: "hello world',
                suggestion="Add closing quote \" at the end of the string",
                context="String literals must be enclosed in double quotes"
            )

        if depth > 0:
            paren_word = "parenthesis" if depth == 1 else "parentheses"
            raise KajispTokenError(
                message=f"Unterminated parenthesis group - missing {depth} closing {paren_word}",
                position=offset + group_start,
                received=f"Group starting with: {self._snippet(source, group_start)}",
                expected=f"{depth} more ')'",
                example="Correct: (+ 1 2)\nIncorrect: (+ 1 2",
                suggestion=f"Add {depth} closing {paren_word}: {')' * depth}",
                context="Reached end of input inside a parenthesis group"
            )

        flush()
        return tokens

    def _snippet(self, source: str, position: int, length: int = 20) -> str:
        """Get a short snippet of source for error display."""
        end = min(position + length, len(source))
        snippet = ' '.join(source[position:end].split())
        if end < len(source):
            snippet += "..."

        return snippet
