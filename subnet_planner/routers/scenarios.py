"""Reference architecture scenarios.

Static subnet layouts for common cloud deployments, used as starting points
for VLSM planning.
"""

from fastapi import APIRouter

from ..models.scenario import Scenario

router = APIRouter(prefix="/api/v1/scenarios", tags=["scenarios"])

REFERENCE_SCENARIOS = [
    Scenario(
        name="Multi-Tier Web Application",
        description="Optimized for web, app, and database tiers with security segmentation",
        subnets=[
            {"cidr": "/26", "purpose": "Web Tier (Public)", "hosts": 62},
            {"cidr": "/25", "purpose": "Application Tier (Private)", "hosts": 126},
            {"cidr": "/27", "purpose": "Database Tier (Private)", "hosts": 30},
        ],
        estimated_savings=1200,
    ),
    Scenario(
        name="Microservices Architecture",
        description="Container-optimized subnetting for Kubernetes/ECS workloads",
        subnets=[
            {"cidr": "/24", "purpose": "Container Nodes", "hosts": 254},
            {"cidr": "/26", "purpose": "Load Balancers", "hosts": 62},
            {"cidr": "/28", "purpose": "Management", "hosts": 14},
        ],
        estimated_savings=800,
    ),
    Scenario(
        name="Hybrid Cloud Connectivity",
        description="Optimized for on-premises integration with dedicated connectivity",
        subnets=[
            {"cidr": "/25", "purpose": "Hybrid Workloads", "hosts": 126},
            {"cidr": "/27", "purpose": "VPN Gateway", "hosts": 30},
            {"cidr": "/28", "purpose": "Directory Services", "hosts": 14},
        ],
        estimated_savings=2000,
    ),
]


@router.get("", response_model=list[Scenario])
async def list_scenarios():
    """List reference architecture scenarios."""
    return REFERENCE_SCENARIOS
