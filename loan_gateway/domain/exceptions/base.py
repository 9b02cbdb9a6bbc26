"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Every loan decision failure carries a stable machine-readable ``code``
    next to its human-readable ``message`` so that adapters can map it
    without inspecting the text.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
