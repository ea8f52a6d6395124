"""Exception hierarchy for review_analyzer."""


class ReviewAnalyzerError(Exception):
    """Base exception for all review_analyzer errors."""

    pass


class NoSignalError(ReviewAnalyzerError):
    """Raised when neither critique text nor annotations were supplied."""

    pass


class UpstreamServiceError(ReviewAnalyzerError):
    """Raised when the generative-text service fails or returns nothing usable."""

    def __init__(self, message: str, service: str = "generative-text"):
        super().__init__(message)
        self.service = service


class MissingAPIKeyError(ReviewAnalyzerError):
    """Raised when a required API key is not found."""

    def __init__(self, env_var: str):
        super().__init__(f"API key not found. Set the {env_var} environment variable.")
        self.env_var = env_var


class InputFormatError(ReviewAnalyzerError):
    """Raised when an input file cannot be read as critique text or annotations."""

    pass
