"""Operational commands run against an Alfred MCP Server deployment."""
