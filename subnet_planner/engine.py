"""IPv4 subnet engine.

Pure calculations for subnet planning:
- Network/broadcast addresses, subnet and wildcard masks
- Usable host range and utilization
- VLSM optimal prefix recommendation and sub-block breakdown
- Heuristic security score (prefix size, availability zones, compliance tier)

Nothing in this module performs I/O, logs, or keeps state between calls.
Invalid input raises a SubnetValidationError subclass before any arithmetic
runs, so a partially populated result is never returned.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from ipaddress import IPv4Address, IPv4Network

from .errors import (
    InvalidAvailabilityZones,
    InvalidComplianceTier,
    InvalidHostCount,
    InvalidIPFormat,
    InvalidPrefixLength,
    OctetOutOfRange,
)

# Prefixes shorter than /8 are rejected as impractically large for planning
MIN_PREFIX_LENGTH = 8
MAX_PREFIX_LENGTH = 32

# Largest host count that still fits a /8
MAX_HOSTS_REQUIRED = 16777214

MAX_VLSM_BLOCKS = 4

# Numeric form inputs longer than this are out of range for every field
MAX_NUMBER_LENGTH = 32

OPTIMAL_MESSAGE = "Current CIDR is optimal for requirements"


class ComplianceTier(str, Enum):
    """Compliance levels used by the security score."""

    STANDARD = "standard"
    ENHANCED = "enhanced"
    STRICT = "strict"


@dataclass(frozen=True)
class VLSMRecommendation:
    optimal_prefix: int
    optimal_host_count: int
    is_optimal: bool
    message: str


@dataclass(frozen=True)
class VLSMBlock:
    network: str
    cidr: str
    mask: str
    host_capacity: int


@dataclass(frozen=True)
class SubnetDescriptor:
    """Complete result of one subnet calculation."""

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
    hosts_required: int
    utilization_percent: float
    vlsm_recommendation: VLSMRecommendation
    vlsm_blocks: tuple[VLSMBlock, ...]
    security_score: int

    @property
    def usable_range(self) -> str | None:
        if self.first_usable is None:
            return None
        return f"{self.first_usable} - {self.last_usable}"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["vlsm_blocks"] = list(data["vlsm_blocks"])
        data["usable_range"] = self.usable_range
        return data


def parse_ipv4(value: str) -> IPv4Address:
    """Parse dotted-decimal IPv4 text.

    Args:
        value: Address such as "192.168.1.10"

    Returns:
        IPv4Address

    Raises:
        InvalidIPFormat: If empty, not four octets, or an octet is not a number
        OctetOutOfRange: If an octet is greater than 255
    """
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise InvalidIPFormat("IP address is required")

    segments = text.split(".")
    if len(segments) != 4:
        raise InvalidIPFormat(
            f"Invalid IP format: expected 4 octets, got {len(segments)}. Use xxx.xxx.xxx.xxx (e.g., 192.168.1.0)"
        )

    octets = []
    for position, segment in enumerate(segments, start=1):
        if not (segment.isascii() and segment.isdigit()):
            raise InvalidIPFormat(f"Octet {position} is not a number (got '{segment}')")
        if len(segment.lstrip("0")) > 3:
            raise OctetOutOfRange(position)
        octets.append(int(segment))

    for position, octet in enumerate(octets, start=1):
        if octet > 255:
            raise OctetOutOfRange(position, octet)

    return IPv4Address(bytes(octets))


def _parse_whole_number(value, error_cls, label: str, out_of_range: str) -> int:
    """Accept ints and numeric strings (as typed into a form)."""
    if isinstance(value, bool):
        raise error_cls(f"{label} must be a whole number")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise error_cls(f"{label} must be a whole number (got {value})")

    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise error_cls(f"{label} is required")
    if len(text) > MAX_NUMBER_LENGTH:
        raise error_cls(out_of_range)

    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        raise error_cls(f"{label} must be a valid number (got '{text}')") from None

    if not number.is_integer():
        raise error_cls(f"{label} must be a whole number (got {text})")
    return int(number)


def parse_prefix_length(value) -> int:
    """Parse a prefix length such as 24, "24" or "/24"."""
    if isinstance(value, str):
        value = value.strip().lstrip("/")

    prefix = _parse_whole_number(
        value,
        InvalidPrefixLength,
        "CIDR",
        f"CIDR must be between /{MIN_PREFIX_LENGTH} and /{MAX_PREFIX_LENGTH}",
    )
    if prefix < MIN_PREFIX_LENGTH or prefix > MAX_PREFIX_LENGTH:
        raise InvalidPrefixLength(
            f"CIDR must be between /{MIN_PREFIX_LENGTH} and /{MAX_PREFIX_LENGTH} (got /{prefix})"
        )
    return prefix


def parse_hosts_required(value) -> int:
    hosts = _parse_whole_number(
        value, InvalidHostCount, "Hosts needed", f"Hosts needed must not exceed {MAX_HOSTS_REQUIRED}"
    )
    if hosts < 0:
        raise InvalidHostCount(f"Hosts needed must be positive (got {hosts})")
    if hosts < 1:
        raise InvalidHostCount("Hosts needed must be at least 1")
    if hosts > MAX_HOSTS_REQUIRED:
        raise InvalidHostCount(f"Hosts needed must not exceed {MAX_HOSTS_REQUIRED} (got {hosts})")
    return hosts


def parse_availability_zones(value) -> int:
    zones = _parse_whole_number(
        value, InvalidAvailabilityZones, "Availability zones", "Availability zones is out of range"
    )
    if zones < 1:
        raise InvalidAvailabilityZones(f"Availability zones must be at least 1 (got {zones})")
    return zones


def parse_compliance_tier(value) -> ComplianceTier:
    if isinstance(value, ComplianceTier):
        return value

    text = value.strip().lower() if isinstance(value, str) else ""
    try:
        return ComplianceTier(text)
    except ValueError:
        valid_tiers = ", ".join([t.value for t in ComplianceTier])
        raise InvalidComplianceTier(f"Invalid compliance tier '{value}'. Must be one of: {valid_tiers}") from None


def subnet_mask(prefix_length: int) -> IPv4Address:
    """Mask with the top ``prefix_length`` bits set."""
    return IPv4Address((0xFFFFFFFF << (32 - prefix_length)) & 0xFFFFFFFF)


def host_capacity(prefix_length: int) -> int:
    """Usable hosts in a subnet of the given prefix (0 for /31 and /32)."""
    return max(2 ** (32 - prefix_length) - 2, 0)


def optimal_prefix(hosts_required: int) -> int:
    """Longest prefix whose usable host count still covers ``hosts_required``.

    ceil(log2(hosts + 2)) is computed with integer bit lengths so exact
    powers of two (e.g. 254 hosts -> 256 addresses) do not round up.
    """
    bits_needed = (hosts_required + 1).bit_length()
    return 32 - bits_needed


def recommend_prefix(hosts_required: int, prefix_length: int) -> VLSMRecommendation:
    best = optimal_prefix(hosts_required)
    capacity = host_capacity(best)

    if best == prefix_length:
        message = OPTIMAL_MESSAGE
    else:
        message = f"Consider using /{best} for optimal IP utilization ({capacity} hosts)"

    return VLSMRecommendation(
        optimal_prefix=best,
        optimal_host_count=capacity,
        is_optimal=best == prefix_length,
        message=message,
    )


def vlsm_blocks(
    network: IPv4Network, block_prefix: int, *, wrap_fourth_octet: bool = False
) -> tuple[VLSMBlock, ...]:
    """Carve up to four equally sized blocks from the start of ``network``.

    Args:
        network: Parent subnet
        block_prefix: Prefix length of each block
        wrap_fourth_octet: Apply block offsets to the last octet modulo 256
            without carrying into the third octet. Reproduces the legacy
            calculator output; only correct for parents of /24 or smaller.

    Returns:
        Tuple of VLSMBlock (empty when a block would not fit the parent)
    """
    block_size = 2 ** (32 - block_prefix)
    block_count = min(MAX_VLSM_BLOCKS, network.num_addresses // block_size)

    mask = str(subnet_mask(block_prefix))
    capacity = host_capacity(block_prefix)
    base = int(network.network_address)

    blocks = []
    for index in range(block_count):
        offset = index * block_size
        if wrap_fourth_octet:
            start = (base & 0xFFFFFF00) | ((base & 0xFF) + offset) % 256
        else:
            start = base + offset
        blocks.append(
            VLSMBlock(
                network=str(IPv4Address(start)),
                cidr=f"/{block_prefix}",
                mask=mask,
                host_capacity=capacity,
            )
        )
    return tuple(blocks)


def security_score(prefix_length: int, availability_zones: int, compliance_tier: ComplianceTier) -> int:
    """Heuristic 0-100 score. Smaller subnets, more AZs and stricter compliance score higher."""
    score = 50

    if prefix_length >= 28:
        score += 25
    elif prefix_length >= 26:
        score += 15
    elif prefix_length >= 24:
        score += 10

    if availability_zones >= 3:
        score += 15
    elif availability_zones >= 2:
        score += 10

    if compliance_tier == ComplianceTier.STRICT:
        score += 10
    elif compliance_tier == ComplianceTier.ENHANCED:
        score += 5

    return max(0, min(100, score))


def prefix_table() -> list[dict]:
    """Host capacity for every prefix the engine accepts."""
    return [
        {
            "prefix_length": prefix,
            "subnet_mask": str(subnet_mask(prefix)),
            "total_addresses": 2 ** (32 - prefix),
            "usable_hosts": host_capacity(prefix),
        }
        for prefix in range(MIN_PREFIX_LENGTH, MAX_PREFIX_LENGTH + 1)
    ]


def calculate_subnet(
    ip_address: str,
    prefix_length,
    hosts_required,
    availability_zones=1,
    compliance_tier="standard",
    *,
    wrap_fourth_octet: bool = False,
) -> SubnetDescriptor:
    """Calculate the full subnet descriptor for an address and prefix.

    Args:
        ip_address: Any IPv4 address inside the subnet
        prefix_length: CIDR prefix length (8-32), int or numeric string
        hosts_required: Hosts the subnet must hold (1-16777214)
        availability_zones: Number of availability zones (>= 1)
        compliance_tier: "standard", "enhanced" or "strict"
        wrap_fourth_octet: See vlsm_blocks()

    Returns:
        SubnetDescriptor

    Raises:
        SubnetValidationError: If any input is invalid
    """
    address = parse_ipv4(ip_address)
    prefix = parse_prefix_length(prefix_length)
    hosts = parse_hosts_required(hosts_required)
    zones = parse_availability_zones(availability_zones)
    tier = parse_compliance_tier(compliance_tier)

    # Masking the host bits gives the network address (strict=False)
    network = IPv4Network((address, prefix), strict=False)
    total_ips = network.num_addresses
    usable_hosts = host_capacity(prefix)

    if usable_hosts > 0:
        first_usable = str(network.network_address + 1)
        last_usable = str(network.broadcast_address - 1)
    else:
        first_usable = None
        last_usable = None

    recommendation = recommend_prefix(hosts, prefix)

    blocks: tuple[VLSMBlock, ...] = ()
    if hosts < usable_hosts:
        blocks = vlsm_blocks(network, recommendation.optimal_prefix, wrap_fourth_octet=wrap_fourth_octet)

    return SubnetDescriptor(
        network_address=str(network.network_address),
        broadcast_address=str(network.broadcast_address),
        subnet_mask=str(network.netmask),
        wildcard_mask=str(network.hostmask),
        cidr=f"/{prefix}",
        prefix_length=prefix,
        total_ips=total_ips,
        usable_hosts=usable_hosts,
        first_usable=first_usable,
        last_usable=last_usable,
        hosts_required=hosts,
        utilization_percent=round(usable_hosts / total_ips * 100, 2),
        vlsm_recommendation=recommendation,
        vlsm_blocks=blocks,
        security_score=security_score(prefix, zones, tier),
    )
