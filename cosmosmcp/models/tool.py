"""Tool descriptor and result envelope models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToolParameter:
    """A single named parameter in a tool's input shape.

    An empty ``type`` accepts any JSON value.
    """

    name: str
    type: str
    description: str
    required: bool = False

    def to_schema(self) -> dict:
        if not self.type:
            return {"description": self.description}
        return {"type": self.type, "description": self.description}


@dataclass(frozen=True)
class ToolDescriptor:
    """Static description of a tool advertised to MCP clients."""

    name: str
    description: str
    parameters: tuple[ToolParameter, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ToolDescriptor name cannot be empty")
        if not self.description:
            raise ValueError("ToolDescriptor description cannot be empty")
        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate parameter names in tool: {self.name}")

    @property
    def required(self) -> list[str]:
        return [p.name for p in self.parameters if p.required]

    def missing_arguments(self, arguments: dict) -> list[str]:
        """Return required parameter names absent (or None) in ``arguments``."""
        return [name for name in self.required if arguments.get(name) is None]

    def input_schema(self) -> dict:
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
            "required": self.required,
        }


@dataclass(frozen=True)
class ToolResult:
    """Uniform result envelope returned by every tool handler.

    Build with :meth:`ok` or :meth:`fail`; a failed result never carries a
    payload.
    """

    success: bool
    message: str
    payload: dict[str, Any] | None = field(default=None)

    def __post_init__(self) -> None:
        if not self.success and self.payload:
            raise ValueError("A failed ToolResult cannot carry a payload")

    @classmethod
    def ok(cls, message: str, **payload: Any) -> ToolResult:
        return cls(success=True, message=message, payload=payload or None)

    @classmethod
    def fail(cls, message: str) -> ToolResult:
        return cls(success=False, message=message)

    def to_dict(self) -> dict:
        d: dict = {"success": self.success, "message": self.message}
        if self.payload:
            d.update(self.payload)
        return d


@dataclass(frozen=True)
class DispatchResponse:
    """Text sent back over the protocol for one tool call."""

    text: str
    is_error: bool = False
