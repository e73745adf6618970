"""Subnet calculation endpoints.

Provides IPv4 subnet calculations with VLSM advice and security scoring.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_event_sink
from ..engine import calculate_subnet, prefix_table
from ..errors import SubnetValidationError
from ..models.subnet import PrefixInfo, SubnetIPv4Request, SubnetIPv4Response, ValidationErrorResponse
from ..telemetry import EventSink

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/subnets", tags=["subnets"])


@router.post(
    "/ipv4",
    response_model=SubnetIPv4Response,
    responses={400: {"model": ValidationErrorResponse, "description": "Invalid input field"}},
)
async def calculate_ipv4_subnet(request: SubnetIPv4Request, sink: EventSink = Depends(get_event_sink)):
    """Calculate IPv4 subnet information for a host count requirement.

    Standard reservations apply: the network and broadcast addresses are not
    usable, so /31 and /32 report zero usable hosts.

    Args:
        request: Address, prefix length, hosts required, AZ count, compliance tier
        sink: Telemetry sink (from dependency)

    Returns:
        Subnet descriptor with VLSM recommendation, blocks and security score

    Raises:
        HTTPException: 400 naming the rejected field
    """
    try:
        descriptor = calculate_subnet(
            request.ip_address,
            request.prefix_length,
            request.hosts_required,
            request.availability_zones,
            request.compliance_tier,
        )
    except SubnetValidationError as e:
        logger.warning(
            "Subnet calculation rejected",
            extra={"error_field": e.field, "error_type": e.error_type},
        )
        sink.emit(
            "calculation_failed",
            {"calculation_type": "subnet", "error_field": e.field, "error_type": e.error_type},
        )
        raise HTTPException(status_code=400, detail=e.to_dict())

    logger.debug(
        f"Calculated {descriptor.network_address}{descriptor.cidr} "
        f"for {descriptor.hosts_required} hosts (score {descriptor.security_score})"
    )
    sink.emit(
        "calculation_performed",
        {
            "calculation_type": "subnet",
            "prefix_length": descriptor.prefix_length,
            "hosts_required": descriptor.hosts_required,
            "optimal_prefix": descriptor.vlsm_recommendation.optimal_prefix,
            "security_score": descriptor.security_score,
        },
    )

    return SubnetIPv4Response(**descriptor.to_dict())


@router.get("/prefixes", response_model=list[PrefixInfo])
async def list_prefixes():
    """Host capacity for every supported prefix length (/8 to /32)."""
    return prefix_table()
