class DiscoveryError(Exception):
    pass


class RecordStoreUnavailable(DiscoveryError):
    """The employee record store could not be queried."""


class InvalidFilterValue(DiscoveryError):
    """A filter parameter could not be parsed into a usable value."""

    def __init__(self, field: str, value: str | None, message: str | None = None):
        self.field = field
        self.value = value
        self.message = message or f"Invalid value for {field}: {value!r}"
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            "error": "InvalidFilterValue",
            "field": self.field,
            "message": self.message,
        }
