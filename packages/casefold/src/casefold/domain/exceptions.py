"""Domain exceptions.

Exception hierarchy:
- CasefoldConfigError: Base domain exception for configuration errors.
  Raised only while settings are being built, never while a request path
  is being rewritten.
"""


class CasefoldConfigError(Exception):
    """Raised when casefold configuration is invalid.

    This is the base exception for all domain-level configuration errors.
    It is raised by domain entities (e.g., CasefoldSettings) and use cases
    (e.g., ConfigParser) when configuration validation fails.

    Framework adapters (Django, FastAPI) may catch this and re-raise as
    framework-specific exceptions, but the domain layer always uses this.
    """

    pass
