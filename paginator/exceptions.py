"""
Pagination exceptions
"""


class ErrorCode:
    """Error codes raised by the pagination helpers"""
    INVALID_PROPERTY = "INVALID_PROPERTY"
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN_CONFIG_GROUP = "UNKNOWN_CONFIG_GROUP"


class PaginationError(Exception):
    """Base pagination exception"""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(self.message)


class InvalidPropertyError(PaginationError, AttributeError):
    """Unknown property name requested from a state or passed to setup()"""
    def __init__(self, name: str, owner: str):
        super().__init__(
            ErrorCode.INVALID_PROPERTY,
            f"Invalid property '{name}' requested from {owner}"
        )
        self.name = name


class InvalidInputError(PaginationError, TypeError):
    """Input value that cannot be read as an integer"""
    def __init__(self, field: str, value):
        super().__init__(
            ErrorCode.INVALID_INPUT,
            f"{field} must be an integer, got {value!r}"
        )
        self.field = field
        self.value = value


class UnknownConfigGroupError(PaginationError, KeyError):
    """Config group that was never registered"""
    def __init__(self, group: str):
        super().__init__(
            ErrorCode.UNKNOWN_CONFIG_GROUP,
            f"Pagination config group '{group}' is not registered"
        )
        self.group = group

    def __str__(self) -> str:
        return self.message
