"""Tool definitions and result models for the MCP server."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Annotated, Any, Callable, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools."""

    model_config = ConfigDict(extra="forbid")


class TextContent(BaseModel):
    """Plain text content item."""

    type: Literal["text"] = "text"
    text: str


class ImageContent(BaseModel):
    """Base64 encoded image content item."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["image"] = "image"
    data: str
    mime_type: str = Field(alias="mimeType")


class ResourceContent(BaseModel):
    """Embedded resource content item."""

    type: Literal["resource"] = "resource"
    resource: Dict[str, Any]


ContentItem = Annotated[
    Union[TextContent, ImageContent, ResourceContent], Field(discriminator="type")
]


class ToolResult(BaseModel):
    """Result returned by a tool handler.

    Attributes:
        content: Ordered content items produced by the tool.
        is_error: Set when the tool itself reports a failure. The failure is
            still delivered as a JSON-RPC result, not as a JSON-RPC error.

    """

    model_config = ConfigDict(populate_by_name=True)

    content: List[ContentItem] = Field(default_factory=list)
    is_error: Optional[bool] = Field(default=None, alias="isError")

    def to_payload(self) -> Dict[str, Any]:
        """Serialize the result to its wire representation."""
        return self.model_dump(by_alias=True, exclude_none=True)


def text_result(text: str) -> ToolResult:
    """Build a successful single-text result."""
    return ToolResult(content=[TextContent(text=text)])


def error_result(text: str) -> ToolResult:
    """Build a tool-reported error result."""
    return ToolResult(content=[TextContent(text=text)], is_error=True)


HandlerReturn = Union[ToolResult, Dict[str, Any]]
ToolHandler = Callable[[Dict[str, Any]], Union[HandlerReturn, Awaitable[HandlerReturn]]]


class ToolArgumentsError(ValueError):
    """Raised when tool arguments fail schema validation."""


def describe_validation_error(error: ValidationError) -> str:
    """Render a pydantic validation error as a single readable line."""
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "arguments"
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems) or str(error)


@dataclass
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input arguments.
        handler: Callable that executes the tool logic. It may return the
            result directly or an awaitable producing it.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: ToolHandler

    def validate(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and coerce incoming tool arguments.

        Args:
            arguments: Input arguments provided for the tool.

        Raises:
            ToolArgumentsError: If argument validation fails.

        Returns:
            Validated argument dictionary.
        """

        try:
            model = self.parameters_model.model_validate(arguments)
        except ValidationError as error:
            raise ToolArgumentsError(
                f"Invalid arguments for tool '{self.name}': "
                f"{describe_validation_error(error)}"
            ) from error
        return model.model_dump()

    async def invoke(self, arguments: Dict[str, Any]) -> HandlerReturn:
        """Run the handler, awaiting its result when it is deferred."""

        result = self.handler(arguments)
        if inspect.isawaitable(result):
            result = await result
        return result

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON Schema advertised for the tool arguments."""

        return self.parameters_model.model_json_schema()

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


def echo_tool() -> ToolDefinition:
    """Create a tool that echoes its message back.

    Returns:
        ToolDefinition wired to the echo handler.
    """

    class EchoParameters(ToolParameters):
        """Parameters for the echo tool."""

        message: str = Field(description="Message to echo back")

    def handler(arguments: Dict[str, Any]) -> ToolResult:
        """Return the received message as text."""

        return text_result(f"Received: {arguments['message']}")

    return ToolDefinition(
        name="echo",
        description="Echo a message back to the caller.",
        parameters_model=EchoParameters,
        handler=handler,
    )
