"""Validation errors raised by the subnet engine.

Every error names the input field that failed so callers (the HTTP layer,
a CLI, a notebook) can surface it next to the right form control.
"""


class SubnetValidationError(ValueError):
    """Base class for rejected subnet calculation inputs."""

    field = ""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {
            "error_field": self.field,
            "error_type": self.error_type,
            "error_message": self.message,
        }


class InvalidIPFormat(SubnetValidationError):
    """Empty address, wrong number of octets, or a non-numeric octet."""

    field = "ip_address"


class OctetOutOfRange(SubnetValidationError):
    """An octet outside 0-255. ``octet`` is the 1-based position."""

    field = "ip_address"

    def __init__(self, octet: int, value: int | None = None):
        message = f"Octet {octet} must be between 0 and 255"
        if value is not None:
            message += f" (got {value})"
        super().__init__(message)
        self.octet = octet
        self.value = value


class InvalidPrefixLength(SubnetValidationError):
    field = "prefix_length"


class InvalidHostCount(SubnetValidationError):
    field = "hosts_required"


class InvalidAvailabilityZones(SubnetValidationError):
    field = "availability_zones"


class InvalidComplianceTier(SubnetValidationError):
    field = "compliance_tier"
