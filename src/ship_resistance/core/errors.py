class ConfigurationError(ValueError):
    """Raised if a ship, method or engine is configured in a way no formula covers.

    Physically malformed inputs (negative speeds, out-of-range salinity, ...) do
    not raise but are logged and evaluate to zero.
    """

    pass
