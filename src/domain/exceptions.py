"""Domain exceptions"""


class InvalidComputationInput(ValueError):
    """A numeric field required by the invoice calculation is missing"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
