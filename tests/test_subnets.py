"""Tests for subnet calculation endpoints."""

import pytest


class TestIPv4SubnetCalculation:
    """Tests for /api/v1/subnets/ipv4 endpoint."""

    def test_standard_slash_24(self, client):
        """10.0.0.0/24 for 254 hosts is already optimal."""
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.0", "prefix_length": 24, "hosts_required": 254},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["network_address"] == "10.0.0.0"
        assert data["broadcast_address"] == "10.0.0.255"
        assert data["subnet_mask"] == "255.255.255.0"
        assert data["cidr"] == "/24"
        assert data["total_ips"] == 256
        assert data["usable_hosts"] == 254
        assert data["usable_range"] == "10.0.0.1 - 10.0.0.254"
        assert data["vlsm_recommendation"]["optimal_prefix"] == 24
        assert data["vlsm_recommendation"]["message"] == "Current CIDR is optimal for requirements"
        assert data["vlsm_blocks"] == []
        assert data["security_score"] == 60

    def test_form_string_inputs(self, client):
        """Numeric fields accept strings as typed into a form."""
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={
                "ip_address": "192.168.1.10",
                "prefix_length": "/28",
                "hosts_required": "10",
                "availability_zones": "3",
                "compliance_tier": "strict",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["network_address"] == "192.168.1.0"
        assert data["broadcast_address"] == "192.168.1.15"
        assert data["first_usable"] == "192.168.1.1"
        assert data["last_usable"] == "192.168.1.14"
        assert data["security_score"] == 100

    def test_vlsm_blocks_returned(self, client):
        """Oversized subnet returns a recommendation and blocks."""
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.0", "prefix_length": 23, "hosts_required": 100},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["vlsm_recommendation"]["optimal_prefix"] == 25
        assert data["vlsm_recommendation"]["is_optimal"] is False
        assert [block["network"] for block in data["vlsm_blocks"]] == [
            "10.0.0.0",
            "10.0.0.128",
            "10.0.1.0",
            "10.0.1.128",
        ]
        assert data["vlsm_blocks"][0]["mask"] == "255.255.255.128"
        assert data["vlsm_blocks"][0]["host_capacity"] == 126

    def test_slash_31_has_no_usable_range(self, client):
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.0", "prefix_length": 31, "hosts_required": 1},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["usable_hosts"] == 0
        assert data["usable_range"] is None
        assert data["first_usable"] is None

    def test_octet_out_of_range(self, client):
        """10.0.0.256 is rejected naming the fourth octet."""
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.256", "prefix_length": 24, "hosts_required": 10},
        )
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error_field"] == "ip_address"
        assert detail["error_type"] == "OctetOutOfRange"
        assert "Octet 4" in detail["error_message"]

    def test_invalid_ip_format(self, client):
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "not-an-ip", "prefix_length": 24, "hosts_required": 10},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error_type"] == "InvalidIPFormat"

    def test_invalid_prefix_length(self, client):
        """Prefix /33 is rejected."""
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.0", "prefix_length": 33, "hosts_required": 10},
        )
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error_field"] == "prefix_length"
        assert detail["error_type"] == "InvalidPrefixLength"

    def test_invalid_host_count(self, client):
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.0", "prefix_length": 24, "hosts_required": 0},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error_type"] == "InvalidHostCount"

    def test_non_numeric_host_count(self, client):
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.0", "prefix_length": 24, "hosts_required": "lots"},
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error_field"] == "hosts_required"

    @pytest.mark.parametrize(
        "field,payload",
        [
            ("ip_address", {"ip_address": "1" * 5000 + ".0.0.0"}),
            ("prefix_length", {"prefix_length": "1" * 5000}),
            ("hosts_required", {"hosts_required": "1" * 5000}),
        ],
    )
    def test_overlong_digit_strings(self, client, field, payload):
        """Huge digit strings are rejected with a 400 naming the field."""
        body = {"ip_address": "10.0.0.0", "prefix_length": 24, "hosts_required": 10, **payload}
        response = client.post("/api/v1/subnets/ipv4", json=body)
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["error_field"] == field
        assert len(detail["error_message"]) < 100

    def test_invalid_compliance_tier(self, client):
        response = client.post(
            "/api/v1/subnets/ipv4",
            json={
                "ip_address": "10.0.0.0",
                "prefix_length": 24,
                "hosts_required": 10,
                "compliance_tier": "gold",
            },
        )
        assert response.status_code == 400
        assert response.json()["detail"]["error_type"] == "InvalidComplianceTier"

    def test_missing_field(self, client):
        """Structurally incomplete body is a 422."""
        response = client.post("/api/v1/subnets/ipv4", json={"prefix_length": 24, "hosts_required": 10})
        assert response.status_code == 422


class TestSubnetTelemetry:
    """Subnet endpoint reports calculation events."""

    def test_success_emits_calculation_performed(self, client, event_sink):
        client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.0", "prefix_length": 24, "hosts_required": 100},
        )
        assert event_sink.counts() == {"calculation_performed": 1}
        event = event_sink.events[0]
        assert event.properties["calculation_type"] == "subnet"
        assert event.properties["prefix_length"] == 24
        assert event.properties["optimal_prefix"] == 25

    def test_failure_emits_calculation_failed(self, client, event_sink):
        client.post(
            "/api/v1/subnets/ipv4",
            json={"ip_address": "10.0.0.0", "prefix_length": 40, "hosts_required": 100},
        )
        assert event_sink.counts() == {"calculation_failed": 1}
        assert event_sink.events[0].properties["error_field"] == "prefix_length"

    def test_structural_error_emits_nothing(self, client, event_sink):
        client.post("/api/v1/subnets/ipv4", json={})
        assert event_sink.events == []


class TestPrefixes:
    """Tests for /api/v1/subnets/prefixes endpoint."""

    def test_lists_supported_prefixes(self, client):
        response = client.get("/api/v1/subnets/prefixes")
        assert response.status_code == 200
        data = response.json()
        assert [row["prefix_length"] for row in data] == list(range(8, 33))
        assert data[-1] == {
            "prefix_length": 32,
            "subnet_mask": "255.255.255.255",
            "total_addresses": 1,
            "usable_hosts": 0,
        }
