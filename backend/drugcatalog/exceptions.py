"""Exception types shared by the data-access, API and UI layers."""


class CatalogError(Exception):
    """Base class for drug catalog errors."""


class ConfigurationError(CatalogError):
    """Missing or invalid connection settings. Fatal at startup."""


class DatabaseConnectionError(CatalogError):
    """The database could not be reached."""


class QueryError(CatalogError):
    """A database operation failed. The message is safe to show to callers."""


class CatalogClientError(CatalogError):
    """A UI fetch failed or the API answered with success=false."""
