"""Decorator attaching a tool schema to a function."""
from typing import Any, Callable


def tool(
    name: str,
    description: str,
    properties: dict[str, Any],
    required: list[str],
) -> Callable[[Callable], Callable]:
    """Attach an Anthropic-style tool schema as ``__tool_schema__``.

    The decorated function is returned unchanged, so it can still be called
    directly; ToolRegistry.register_tools() reads the attached schema.

    Example:
        >>> @tool(
        ...     name="rewrite_file",
        ...     description="Overwrite a file",
        ...     properties={"file_path": {"type": "string"}},
        ...     required=["file_path"],
        ... )
        ... async def rewrite_file(file_path: str) -> str: ...
        >>> rewrite_file.__tool_schema__["name"]
        'rewrite_file'
    """
    missing = [key for key in required if key not in properties]
    if missing:
        raise ValueError(f"Tool '{name}' requires undeclared properties: {', '.join(missing)}")

    def decorator(func: Callable) -> Callable:
        func.__tool_schema__ = {
            "name": name,
            "description": description,
            "input_schema": {
                "type": "object",
                "properties": properties,
                "required": required,
            },
        }
        return func

    return decorator
