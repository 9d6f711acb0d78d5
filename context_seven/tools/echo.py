"""
MCP Tool - echo / reverse_echo

Connectivity check tools.
"""

from fastmcp import FastMCP

from context_seven.logging_config import ToolCallLogger


def create_router(server_name: str, call_log: ToolCallLogger) -> FastMCP:
    """Build the router holding the echo tools."""
    router = FastMCP("echo")

    @router.tool()
    def echo(message: str) -> str:
        """
        Echoes the message back to the client.

        Args:
            message: Text to echo

        Returns:
            Greeting from the server followed by the message
        """
        call_log.call("echo", message)
        response = f"Hello from {server_name}: {message}"
        call_log.result("echo", response)
        return response

    @router.tool()
    def reverse_echo(message: str) -> str:
        """
        Echoes in reverse the message sent by the client.

        Args:
            message: Text to reverse

        Returns:
            The message with its characters reversed
        """
        call_log.call("reverse_echo", message)
        response = message[::-1]
        call_log.result("reverse_echo", response)
        return response

    return router
