"""Argument access helpers shared by the Kajisp operators."""

from typing import List

from kajisp.kajisp_error import KajispEvalError, ErrorMessageBuilder
from kajisp.kajisp_value import KajispValue


def require_argument(args: List[KajispValue], index: int, operator_name: str) -> KajispValue:
    """
    Get a required positional argument.

    Args:
        args: Evaluated arguments
        index: Zero-based argument position
        operator_name: Operator name for error messages

    Returns:
        The argument at index

    Raises:
        KajispEvalError: If there is no argument at index
    """
    if index < len(args):
        return args[index]

    ordinal = index + 1
    plural = "" if ordinal == 1 else "s"
    raise KajispEvalError(
        message=f"Operator '{operator_name}' is missing argument {ordinal}",
        received=f"{len(args)} argument{'' if len(args) == 1 else 's'}",
        expected=f"At least {ordinal} argument{plural}",
        example=ErrorMessageBuilder.create_operator_example(operator_name)
    )
