class ConfigurationError(ValueError):
    """
    Raised when system parameters or grid settings cannot produce a valid plot.
    """
