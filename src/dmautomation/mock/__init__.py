"""Mock implementations of platform collaborators."""

from .mock_executor import RecordingScriptExecutor, ScriptRequest

__all__ = ["RecordingScriptExecutor", "ScriptRequest"]
