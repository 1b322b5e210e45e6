class MissingArgumentError(ValueError):
    """raised when a required argument is None"""

    def __init__(self, argument: str):
        super().__init__(f"missing required argument: {argument}")
        self.argument = argument
