"""Multi-cloud network cost estimator.

Monthly cost is a rate-table lookup multiplied by quantities. Rates are
static policy values, not live provider prices; pass a custom RateTable to
price against different numbers.
"""

import math
from dataclasses import asdict, dataclass, field, replace

MONTHLY_HOURS = 24 * 30
STORAGE_GB_PER_INSTANCE = 50

# Savings heuristics
CDN_SAVINGS_THRESHOLD_GB = 5000
CDN_SAVINGS_RATE = 0.15
RESERVED_INSTANCE_SAVINGS_RATE = 0.30

# Recommendation thresholds
CDN_RECOMMENDATION_THRESHOLD_GB = 10000
RESERVED_INSTANCE_RECOMMENDATION_THRESHOLD = 10
NAT_GATEWAY_RATE_THRESHOLD = 0.04


class CostEstimationError(ValueError):
    """Raised for unknown providers or impossible quantities."""


@dataclass(frozen=True)
class ProviderRates:
    compute: float  # per instance-hour
    networking: float  # per GB transferred
    storage: float  # per GB-month
    load_balancer: float  # per hour per availability zone
    nat_gateway: float  # per hour per availability zone

    def scaled(self, multiplier: float) -> "ProviderRates":
        return ProviderRates(
            compute=self.compute * multiplier,
            networking=self.networking * multiplier,
            storage=self.storage * multiplier,
            load_balancer=self.load_balancer * multiplier,
            nat_gateway=self.nat_gateway * multiplier,
        )


@dataclass(frozen=True)
class RateTable:
    providers: dict[str, ProviderRates]
    region_multipliers: dict[str, float] = field(default_factory=dict)

    def region_multiplier(self, region: str) -> float:
        return self.region_multipliers.get(region, 1.0)

    def rates_for(self, provider: str, region: str) -> ProviderRates:
        """Provider base rates adjusted for region (unknown regions use 1.0)."""
        key = provider.strip().lower()
        if key not in self.providers:
            valid = ", ".join(sorted(self.providers))
            raise CostEstimationError(f"Unknown provider '{provider}'. Must be one of: {valid}")
        return self.providers[key].scaled(self.region_multiplier(region))

    def with_providers(self, overrides: dict[str, ProviderRates]) -> "RateTable":
        """Copy of this table with providers added or replaced."""
        if not overrides:
            return self
        providers = dict(self.providers)
        providers.update({name.lower(): rates for name, rates in overrides.items()})
        return replace(self, providers=providers)


DEFAULT_RATE_TABLE = RateTable(
    providers={
        "aws": ProviderRates(compute=0.0464, networking=0.09, storage=0.10, load_balancer=0.0225, nat_gateway=0.045),
        "azure": ProviderRates(compute=0.0496, networking=0.087, storage=0.0184, load_balancer=0.028, nat_gateway=0.046),
        "gcp": ProviderRates(compute=0.0475, networking=0.12, storage=0.020, load_balancer=0.025, nat_gateway=0.045),
    },
    region_multipliers={
        "us-east-1": 1.0,
        "us-west-2": 1.05,
        "eu-west-1": 1.15,
        "ap-southeast-1": 1.25,
    },
)


@dataclass(frozen=True)
class CostBreakdown:
    compute: float
    networking: float
    storage: float
    load_balancer: float
    nat_gateway: float

    @property
    def total(self) -> float:
        return self.compute + self.networking + self.storage + self.load_balancer + self.nat_gateway


@dataclass(frozen=True)
class CostEstimate:
    provider: str
    region: str
    monthly_data_transfer_gb: float
    instance_count: int
    availability_zones: int
    breakdown: CostBreakdown
    estimated_monthly_cost: float
    recommendations: tuple[str, ...]
    savings_opportunity: float

    def to_dict(self) -> dict:
        data = asdict(self)
        data["recommendations"] = list(self.recommendations)
        return data


def cost_recommendations(rates: ProviderRates, data_transfer_gb: float, instance_count: int) -> list[str]:
    recommendations = []
    if data_transfer_gb > CDN_RECOMMENDATION_THRESHOLD_GB:
        recommendations.append("Consider implementing CloudFront/CDN for high data transfer volumes")
    if instance_count > RESERVED_INSTANCE_RECOMMENDATION_THRESHOLD:
        recommendations.append("Evaluate Reserved Instances for potential 30-60% savings")
    if rates.nat_gateway > NAT_GATEWAY_RATE_THRESHOLD:
        recommendations.append("Consider NAT instance instead of NAT Gateway for cost optimization")
    return recommendations


def savings_opportunity(total_cost: float, data_transfer_gb: float) -> float:
    savings = 0.0
    if data_transfer_gb > CDN_SAVINGS_THRESHOLD_GB:
        savings += total_cost * CDN_SAVINGS_RATE
    savings += total_cost * RESERVED_INSTANCE_SAVINGS_RATE
    return savings


def estimate_costs(
    provider: str,
    region: str,
    instance_count: int,
    data_transfer_gb: float,
    availability_zones: int = 1,
    rate_table: RateTable = DEFAULT_RATE_TABLE,
) -> CostEstimate:
    """Estimate monthly network and compute cost for one provider/region.

    Args:
        provider: Provider key in the rate table (aws, azure, gcp)
        region: Region name; unknown regions are priced at the base rate
        instance_count: Number of compute instances
        data_transfer_gb: Monthly outbound data transfer in GB
        availability_zones: AZs with a load balancer and NAT gateway each
        rate_table: Rates to price against

    Returns:
        CostEstimate

    Raises:
        CostEstimationError: Unknown provider or out-of-range quantity
    """
    if instance_count < 0:
        raise CostEstimationError(f"Instance count must not be negative (got {instance_count})")
    if not math.isfinite(data_transfer_gb):
        raise CostEstimationError(f"Data transfer must be a finite number (got {data_transfer_gb})")
    if data_transfer_gb < 0:
        raise CostEstimationError(f"Data transfer must not be negative (got {data_transfer_gb})")
    if availability_zones < 1:
        raise CostEstimationError(f"Availability zones must be at least 1 (got {availability_zones})")

    rates = rate_table.rates_for(provider, region)

    breakdown = CostBreakdown(
        compute=rates.compute * instance_count * MONTHLY_HOURS,
        networking=rates.networking * data_transfer_gb,
        storage=rates.storage * instance_count * STORAGE_GB_PER_INSTANCE,
        load_balancer=rates.load_balancer * MONTHLY_HOURS * availability_zones,
        nat_gateway=rates.nat_gateway * MONTHLY_HOURS * availability_zones,
    )
    total = breakdown.total

    return CostEstimate(
        provider=provider.strip().upper(),
        region=region,
        monthly_data_transfer_gb=data_transfer_gb,
        instance_count=instance_count,
        availability_zones=availability_zones,
        breakdown=breakdown,
        estimated_monthly_cost=total,
        recommendations=tuple(cost_recommendations(rates, data_transfer_gb, instance_count)),
        savings_opportunity=savings_opportunity(total, data_transfer_gb),
    )
