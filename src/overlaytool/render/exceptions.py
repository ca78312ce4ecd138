"""Exceptions for rendering and writing overlays.

These wrap low-level image library errors with the output path so the CLI can
report them and pick a distinct exit code.
"""

from pathlib import Path


class RenderError(Exception):
    """Base exception for all rendering-related errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize render error with optional path context.

        Args:
            message: Human-readable error description.
            path: Output path involved in the failure.
        """
        self.path = Path(path) if path else None
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with path context if available."""
        if self.path:
            return f"{self.message} (path: {self.path})"
        return self.message


class OutputWriteError(RenderError):
    """Raised when the rendered overlay cannot be written.

    This error is raised when:
    - The file extension does not map to a known image format
    - The destination directory is missing or not writable
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        *,
        reason: str | None = None,
    ) -> None:
        """Initialize write error with the underlying failure.

        Args:
            message: Human-readable error description.
            path: Output path being written.
            reason: Error string reported by the image library.
        """
        self.reason = reason
        super().__init__(message, path)

    def _format_message(self) -> str:
        """Format error message with path and underlying reason."""
        parts = [self.message]
        if self.path:
            parts.append(f"path={self.path}")
        if self.reason:
            parts.append(f"reason={self.reason}")

        if len(parts) == 1:
            return parts[0]
        return f"{parts[0]} ({', '.join(parts[1:])})"
