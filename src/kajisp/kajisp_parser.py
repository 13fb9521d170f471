"""Parser (reader) for Kajisp source text with detailed error messages."""

from kajisp.kajisp_error import KajispParseError
from kajisp.kajisp_token import KajispToken
from kajisp.kajisp_tokenizer import KajispTokenizer
from kajisp.kajisp_value import (
    KajispValue, KajispNumber, KajispString, KajispBoolean, KajispSymbol, KajispList, KajispNil, parse_number
)


class KajispParser:
    """
    Reads Kajisp source text into a value tree.

    Parenthesized groups are read recursively: the group's interior is handed
    back to the tokenizer and each resulting token is read in turn.
    """

    BOOLEAN_LITERALS = {
        'true': True,
        'false': False,
    }

    def __init__(self, source: str = "", max_depth: int = 200):
        """
        Initialize parser with the program source.

        Args:
            source: Complete, trimmed program text
            max_depth: Maximum parenthesis nesting depth
        """
        self.source = source
        self.max_depth = max_depth
        self.tokenizer = KajispTokenizer()

    def parse(self) -> KajispValue:
        """
        Parse the whole source as exactly one expression.

        Returns:
            Parsed expression

        Raises:
            KajispTokenError: If the source has unbalanced parentheses or quotes
            KajispParseError: If the source is empty, holds more than one expression or is nested too deeply
        """
        tokens = self.tokenizer.tokenize(self.source)
        if not tokens:
            raise KajispParseError(
                message="Empty expression",
                expected="Valid Kajisp expression",
                example="(+ 1 2) or 42 or \"hello\"",
                suggestion="Provide a complete expression to evaluate",
                context="Expression cannot be empty or contain only whitespace"
            )

        if len(tokens) > 1:
            extra = tokens[1]
            raise KajispParseError(
                message="Unexpected token after complete expression",
                position=extra.position,
                received=f"Found: {extra.value}",
                expected="End of expression",
                example="Correct: (+ 1 2)\nIncorrect: (+ 1 2) extra",
                suggestion="Remove extra tokens or combine into single expression",
                context="Each evaluation can only handle one complete expression"
            )

        try:
            return self.parse_token(tokens[0])

        except RecursionError as e:
            raise KajispParseError(
                message="Expression too deeply nested for the Python stack",
                position=tokens[0].position,
                suggestion="Reduce nesting depth or lower max_depth",
                context=f"Nesting limit max_depth={self.max_depth} is above what the interpreter stack can hold"
            ) from e

    def parse_token(self, token: KajispToken, depth: int = 0) -> KajispValue:
        """
        Read a single token into a value.

        Args:
            token: Token to read
            depth: Current nesting depth

        Returns:
            The value the token denotes

        Raises:
            KajispParseError: If the token is empty or nested too deeply
        """
        text = token.value
        if not text:
            raise KajispParseError(
                message="Empty token",
                position=token.position,
                expected="Atom, string or parenthesized list",
                context="Tokens must contain at least one character"
            )

        # A lone '(' or '"' is not a group or a string: it falls through to an atom
        if len(text) >= 2:
            if text[0] == '(' and text[-1] == ')':
                return self._parse_list(token, depth)

            if text[0] == '"' and text[-1] == '"':
                return KajispString(text[1:-1])

        return self._parse_atom(text)

    def _parse_list(self, token: KajispToken, depth: int) -> KajispList:
        """Parse (element1 element2 ...) by tokenizing the group's interior."""
        if depth >= self.max_depth:
            raise KajispParseError(
                message=f"Expression too deeply nested (max depth: {self.max_depth})",
                position=token.position,
                suggestion="Reduce nesting depth or increase max_depth limit"
            )

        interior = token.value[1:-1]
        tokens = self.tokenizer.tokenize(interior, token.position + 1)
        return KajispList(tuple(self.parse_token(t, depth + 1) for t in tokens))

    def _parse_atom(self, text: str) -> KajispValue:
        """Parse a bare word: number, boolean, nil or symbol, in that order."""
        number = parse_number(text)
        if number is not None:
            return KajispNumber(number)

        if text in self.BOOLEAN_LITERALS:
            return KajispBoolean(self.BOOLEAN_LITERALS[text])

        if text == 'nil':
            return KajispNil()

        return KajispSymbol(text)
