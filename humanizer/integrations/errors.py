class CompletionError(Exception):
    """The completion service could not produce text (network, HTTP, payload, or config)."""


class TransientCompletionError(CompletionError):
    """A completion failure worth retrying (timeouts, 429, 5xx)."""
