class LLMError(RuntimeError):
    pass


class ContextOverflowError(LLMError):
    """Raised when the conversation no longer fits the model's context window."""

    code = "context_length_exceeded"

    def __init__(self, message: str = "Context length exceeded"):
        super().__init__(message)
