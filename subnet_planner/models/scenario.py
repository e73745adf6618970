"""Pydantic models for reference architecture scenarios."""

from pydantic import BaseModel


class ScenarioSubnet(BaseModel):
    cidr: str
    purpose: str
    hosts: int


class Scenario(BaseModel):
    name: str
    description: str
    subnets: list[ScenarioSubnet]
    estimated_savings: int
