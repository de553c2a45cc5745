"""Domain exceptions mapped to HTTP responses by ``portfolio.api.errors``."""


class PortfolioError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingFieldsError(PortfolioError):
    """A submission is missing one of its required fields."""

    status_code = 400


class AuthenticationError(PortfolioError):
    """Credentials or token were missing or invalid."""

    status_code = 401


class StoreError(PortfolioError):
    """The database could not be reached or a query failed."""

    status_code = 500
