"""Registry for agent-facing tool functions."""
import inspect
from typing import Any, Callable, Dict, Literal

from ..logging import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """Maps tool names to functions and their Anthropic-style schemas.

    Tools may be plain or async functions; ``execute`` awaits whichever it
    gets and always returns a string so results can go straight back into a
    model conversation.
    """

    def __init__(self):
        self.tools: Dict[str, Callable] = {}
        self.schemas: list[dict] = []

    def register(self, name: str, func: Callable, schema: dict) -> None:
        """Register a tool with its function and schema.

        Re-registering a name replaces the previous function and schema.
        """
        if name in self.tools:
            self.schemas = [s for s in self.schemas if s["name"] != name]
        self.tools[name] = func
        self.schemas.append(schema)

    def register_tools(self, tools: list[Callable]) -> None:
        """Register functions decorated with ``@tool(...)``.

        Raises:
            ValueError: If a function is missing the __tool_schema__ attribute
        """
        for func in tools:
            if not hasattr(func, "__tool_schema__"):
                raise ValueError(
                    f"Function '{func.__name__}' is missing __tool_schema__ attribute. "
                    f"Did you forget to apply the @tool decorator?"
                )
            schema = func.__tool_schema__
            self.register(schema["name"], func, schema)

    async def execute(self, tool_name: str, tool_input: Dict[str, Any]) -> str:
        """Execute a registered tool by name.

        Unknown tools and exceptions raised by the tool are reported as
        ``"Error: ..."`` strings rather than propagated.
        """
        if tool_name not in self.tools:
            return f"Error: Unknown tool '{tool_name}'"

        try:
            result = self.tools[tool_name](**tool_input)
            if inspect.isawaitable(result):
                result = await result
            return str(result)
        except Exception as e:
            logger.exception("Tool execution failed", tool=tool_name)
            return f"Error executing {tool_name}: {str(e)}"

    def get_schemas(self, schema_type: Literal["anthropic", "openai"] = "anthropic") -> list[dict]:
        """Get registered tool schemas in the requested format.

        Args:
            schema_type:
                - ``anthropic`` returns the raw schema dictionaries (default)
                - ``openai`` wraps each schema as an OpenAI function-call payload
        """
        if schema_type == "anthropic":
            return self.schemas.copy()

        if schema_type == "openai":
            return [
                {
                    "type": "function",
                    "function": {
                        "name": schema["name"],
                        "description": schema["description"],
                        "parameters": schema["input_schema"],
                    },
                }
                for schema in self.schemas
            ]

        raise ValueError(f"Unsupported schema_type '{schema_type}'. Expected 'anthropic' or 'openai'.")
