"""Cost estimation endpoints.

Prices a deployment against the static rate table. Rates are policy values,
not live provider quotes.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..costs import CostEstimationError, RateTable, estimate_costs
from ..dependencies import get_event_sink, get_rate_table
from ..models.cost import CostEstimateRequest, CostEstimateResponse, ProviderCatalogResponse
from ..telemetry import EventSink

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/costs", tags=["costs"])


@router.post("/estimate", response_model=CostEstimateResponse)
async def estimate_monthly_costs(
    request: CostEstimateRequest,
    rate_table: RateTable = Depends(get_rate_table),
    sink: EventSink = Depends(get_event_sink),
):
    """Estimate monthly cost across compute, networking, storage, LB and NAT.

    Args:
        request: Provider, region, instance count, data transfer, AZ count
        rate_table: Pricing table (from dependency)
        sink: Telemetry sink (from dependency)

    Returns:
        Cost breakdown with recommendations and savings opportunity

    Raises:
        HTTPException: 400 if the provider is unknown
    """
    try:
        estimate = estimate_costs(
            provider=request.provider,
            region=request.region,
            instance_count=request.instance_count,
            data_transfer_gb=request.data_transfer_gb,
            availability_zones=request.availability_zones,
            rate_table=rate_table,
        )
    except CostEstimationError as e:
        logger.warning("Cost estimation rejected", extra={"provider": request.provider})
        raise HTTPException(status_code=400, detail=str(e))

    sink.emit(
        "calculation_performed",
        {
            "calculation_type": "cost",
            "provider": estimate.provider,
            "region": estimate.region,
        },
    )

    return CostEstimateResponse(**estimate.to_dict())


@router.get("/providers", response_model=ProviderCatalogResponse)
async def list_providers(rate_table: RateTable = Depends(get_rate_table)):
    """Providers and region multipliers known to the rate table."""
    return ProviderCatalogResponse(
        providers=sorted(rate_table.providers),
        regions=dict(rate_table.region_multipliers),
    )
