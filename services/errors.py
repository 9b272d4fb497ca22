class ValidationError(ValueError):
    """Raised for input the services refuse to store. Routes turn it into a 400."""

    def __init__(self, message, status_code=400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
