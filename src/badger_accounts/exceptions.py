"""Error kinds raised while building a user account summary."""


class AccountError(Exception):
    """
    Base class for account lookup failures.

    Attributes
    ----------
    status_code : int
        HTTP status a request-handling layer should answer with

    """

    status_code = 500


class InvalidInputError(AccountError):
    """Raised when the user identifier is missing or empty."""

    status_code = 400


class NotFoundError(AccountError):
    """Raised when the subgraph has no record of the user."""

    status_code = 404


class InternalInconsistencyError(AccountError):
    """Raised when balance data references a sett missing from the registry."""

    status_code = 500


class DataSourceError(AccountError):
    """Raised when an upstream data provider fails."""

    status_code = 502


class SubgraphError(DataSourceError):
    """Exception raised for subgraph API errors."""


class PriceFeedError(DataSourceError):
    """Exception raised for price API errors."""
