# graph_services/exceptions.py

class ReconcilerError(Exception):
    """Base class for reconciliation errors."""
    pass

class RendererError(ReconcilerError):
    """Raised when a renderer call fails."""
    pass

class RendererQueryError(RendererError):
    """Raised when the renderer cannot report its current elements."""
    pass

class RendererCommandError(RendererError):
    """Raised when a remove / add / layout command fails."""
    pass

class ReadinessTimeoutError(ReconcilerError):
    """Raised when the renderer never signals readiness within the retry budget."""
    pass

class CommandParseError(ReconcilerError):
    """Raised when a command line is empty or malformed."""
    pass
