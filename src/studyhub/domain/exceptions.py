class InvalidArgumentError(ValueError):
    """Raised when a calculator is handed input outside its documented domain."""
