"""Tool dispatch exceptions."""

from typing import List

from pydantic import ValidationError as PydanticValidationError

from app.exceptions.base import ValidationError


class UnknownToolError(ValidationError):
    """Raised when a tool name is not part of the catalog."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(
            code="UNKNOWN_TOOL",
            message=f"Ferramenta desconhecida: {name}",
            details={"available_tools": available},
        )
        self.name = name


class InvalidToolArgumentsError(ValidationError):
    """Raised when tool arguments fail the tool's input model."""

    def __init__(self, tool: str, field: str):
        super().__init__(
            code="INVALID_ARGUMENTS",
            message=f"{field} é obrigatório",
            details={"tool": tool, "field": field},
        )
        self.tool = tool
        self.field = field

    @classmethod
    def from_validation_error(
        cls, tool: str, exc: PydanticValidationError
    ) -> "InvalidToolArgumentsError":
        """Report the first offending field of a pydantic validation failure."""
        errors = exc.errors()
        loc = errors[0]["loc"] if errors else ()
        field = str(loc[0]) if loc else "arguments"
        return cls(tool=tool, field=field)
