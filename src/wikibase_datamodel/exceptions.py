from typing import Any

from pydantic import ValidationError as PydanticValidationError


class DatamodelError(Exception):
    """Base class for all errors raised by the data model."""


class ValidationError(DatamodelError, ValueError):
    """Raised by a factory when constructing an object would violate an invariant."""

    def __init__(self, model: str, message: str, errors: list[dict[str, Any]] | None = None):
        self.model = model
        self.errors = errors or []
        super().__init__(f"Invalid {model}: {message}")

    @classmethod
    def from_pydantic(cls, model: str, error: PydanticValidationError) -> "ValidationError":
        errors = error.errors(include_url=False)
        messages = []
        for err in errors:
            location = ".".join(str(part) for part in err["loc"])
            messages.append(f"{location}: {err['msg']}" if location else err["msg"])
        return cls(model, "; ".join(messages), errors)


class UnsupportedVariant(DatamodelError, TypeError):
    """Raised when a visitor meets a runtime type outside the closed variant set."""

    def __init__(self, variant: type, message: str = ""):
        self.variant = variant
        super().__init__(message or f"Unsupported variant: {variant.__name__}")
