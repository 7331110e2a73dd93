"""Input objects of the engine schema."""

from typing import Optional

from pydantic import BaseModel

from .enums import NetworkProtocol


class BuildArg(BaseModel):
    """Key value object that represents a build argument."""
    name: str
    value: str


class PipelineLabel(BaseModel):
    """Key value object that represents a pipeline label."""
    name: str
    value: str


class PortForward(BaseModel):
    """Port forwarding rules for tunneling network traffic.

    Attributes:
        backend: Destination port for traffic
        frontend: Port to expose to clients; the engine picks one if unset
        protocol: Transport layer protocol to use for traffic
    """
    backend: int
    frontend: Optional[int] = None
    protocol: Optional[NetworkProtocol] = None
