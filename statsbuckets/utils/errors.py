class InvalidArgumentError(ValueError):
    def __init__(self, message: str, value: object | None = None):
        super().__init__(message)
        self.message = message
        self.value = value
