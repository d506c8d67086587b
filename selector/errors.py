"""Exception hierarchy shared by the selector, typesafe and containers packages."""


class AdvisorError(Exception):
    """Base exception for advisor errors."""
    pass


class ConflictingOptionsError(AdvisorError, ValueError):
    """Usage profile declares options that cannot hold together."""
    pass


class InvalidArgumentError(AdvisorError, ValueError):
    """Precondition failure: None key, None collection, bad profile field."""
    pass


class MisuseError(AdvisorError, TypeError):
    """A disabled untyped equality/hash path was used, or operand types differ."""
    pass


class MissingValueError(AdvisorError, LookupError):
    """A key maps to no value where a present value was required."""
    pass


class UnsupportedContainerError(AdvisorError, LookupError):
    """No container factory is registered for a recommendation."""
    pass


class ConfigError(AdvisorError):
    """Configuration document is malformed."""
    pass
