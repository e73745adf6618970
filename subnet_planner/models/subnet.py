"""Pydantic models for subnet calculation API."""

from pydantic import BaseModel, Field


class SubnetIPv4Request(BaseModel):
    """Request model for IPv4 subnet calculation.

    Numeric fields also accept strings so form input can be passed through
    unchanged; the engine reports a field-level error for anything invalid.
    """

    ip_address: str = Field(..., description="IPv4 address inside the subnet (e.g., 10.0.0.0)")
    prefix_length: int | str = Field(..., description="CIDR prefix length between 8 and 32 (e.g., 24 or /24)")
    hosts_required: int | str = Field(..., description="Number of hosts the subnet must hold (1-16777214)")
    availability_zones: int | str = Field(default=1, description="Availability zones the subnet spans")
    compliance_tier: str = Field(default="standard", description="Compliance tier: standard, enhanced, or strict")


class VLSMRecommendationModel(BaseModel):
    optimal_prefix: int
    optimal_host_count: int
    is_optimal: bool
    message: str


class VLSMBlockModel(BaseModel):
    network: str
    cidr: str
    mask: str
    host_capacity: int


class SubnetIPv4Response(BaseModel):
    """Response model for IPv4 subnet calculation."""

    network_address: str
    broadcast_address: str
    subnet_mask: str
    wildcard_mask: str
    cidr: str
    prefix_length: int
    total_ips: int
    usable_hosts: int
    first_usable: str | None
    last_usable: str | None
    usable_range: str | None
    hosts_required: int
    utilization_percent: float
    vlsm_recommendation: VLSMRecommendationModel
    vlsm_blocks: list[VLSMBlockModel]
    security_score: int


class ValidationErrorDetail(BaseModel):
    """Body of the 400 response ``detail`` when an input is rejected."""

    error_field: str
    error_type: str
    error_message: str


class PrefixInfo(BaseModel):
    prefix_length: int
    subnet_mask: str
    total_addresses: int
    usable_hosts: int


class ValidationErrorResponse(BaseModel):
    detail: ValidationErrorDetail
