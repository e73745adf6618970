"""Pydantic models for cost estimation API."""

from pydantic import BaseModel, Field


class CostEstimateRequest(BaseModel):
    """Request model for monthly cost estimation."""

    provider: str = Field(default="aws", description="Cloud provider: aws, azure, or gcp")
    region: str = Field(default="us-east-1", description="Region name (unknown regions use base rates)")
    instance_count: int = Field(default=5, ge=0, description="Number of compute instances")
    data_transfer_gb: float = Field(
        default=1000, ge=0, allow_inf_nan=False, description="Monthly data transfer in GB (finite)"
    )
    availability_zones: int = Field(default=1, ge=1, description="Availability zones (one LB and NAT each)")


class CostBreakdownModel(BaseModel):
    compute: float
    networking: float
    storage: float
    load_balancer: float
    nat_gateway: float


class CostEstimateResponse(BaseModel):
    """Response model for monthly cost estimation."""

    provider: str
    region: str
    monthly_data_transfer_gb: float
    instance_count: int
    availability_zones: int
    breakdown: CostBreakdownModel
    estimated_monthly_cost: float
    recommendations: list[str]
    savings_opportunity: float


class ProviderCatalogResponse(BaseModel):
    providers: list[str]
    regions: dict[str, float]
