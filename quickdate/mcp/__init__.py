"""
QuickDate MCP Module

Exposes the date-recognition engine as MCP tools.
"""
