class GoogleSearchError(Exception):
    """Base error for failures that prevent producing a tool result."""


class UpstreamUnavailableError(GoogleSearchError):
    """The search API could not be reached (connect error, DNS, timeout)."""


class UpstreamDecodeError(GoogleSearchError):
    """The search API answered 200 with a body we cannot decode."""


class UnknownToolError(LookupError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name
