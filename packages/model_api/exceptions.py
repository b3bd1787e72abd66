"""Exceptions raised by model_api for hard failures"""


class ModelAPIError(Exception):
    """Base exception for all model_api errors"""
    pass


class InvalidParentError(ModelAPIError, TypeError):
    """Extension constructed without a Model parent"""

    def __init__(self, parent: object):
        self.parent = parent
        super().__init__(
            f"Extension must be passed its parent Model, got {type(parent).__name__}"
        )


class MissingMethodError(ModelAPIError, AttributeError):
    """Source method for a forwarder is not defined on the extension"""

    def __init__(self, method_name: str):
        self.method_name = method_name
        super().__init__(f"{method_name} method not found in the Extension")


class MethodConflictError(ModelAPIError, ValueError):
    """Forwarder destination already exists on the Model"""

    def __init__(self, dest_name: str):
        self.dest_name = dest_name
        super().__init__(f"{dest_name} was already defined in the Model")
