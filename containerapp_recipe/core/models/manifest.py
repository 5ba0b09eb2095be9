"""
Manifest models — what the recipe hands back.

``TargetManifest`` mirrors the platform's container-app resource body.
Only fields the platform schema accepts are modelled; anything the
recipe cannot represent simply has no field here.  Optional blocks are
left as ``None`` and dropped by ``to_dict()``, so the serialized body
never carries ``null`` placeholders or empty lists that were not asked for.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _ManifestModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict:
        """Serialize with platform field names, omitting absent blocks."""
        return self.model_dump(by_alias=True, exclude_none=True)


class EnvVar(_ManifestModel):
    name: str
    value: str


class ContainerResourcesSpec(_ManifestModel):
    cpu: float
    memory: str


class HttpGetSpec(_ManifestModel):
    port: int
    path: str = "/"
    scheme: str = "HTTP"


class TcpSocketSpec(_ManifestModel):
    port: int


class ProbeSpec(_ManifestModel):
    """A health probe in the platform's vocabulary (HTTP or TCP only)."""

    type: Literal["Liveness", "Readiness"]
    http_get: HttpGetSpec | None = Field(default=None, alias="httpGet")
    tcp_socket: TcpSocketSpec | None = Field(default=None, alias="tcpSocket")

    initial_delay_seconds: int | None = Field(default=None, alias="initialDelaySeconds")
    period_seconds: int | None = Field(default=None, alias="periodSeconds")
    timeout_seconds: int | None = Field(default=None, alias="timeoutSeconds")
    failure_threshold: int | None = Field(default=None, alias="failureThreshold")
    success_threshold: int | None = Field(default=None, alias="successThreshold")


class ContainerSpec(_ManifestModel):
    name: str
    image: str
    resources: ContainerResourcesSpec
    command: list[str] | None = None
    args: list[str] | None = None
    env: list[EnvVar] | None = None
    probes: list[ProbeSpec] | None = None


class IngressSpec(_ManifestModel):
    external: bool = False
    target_port: int = Field(alias="targetPort")
    transport: str = "auto"


class DaprSpec(_ManifestModel):
    enabled: bool = True
    app_id: str = Field(alias="appId")
    app_port: int | None = Field(default=None, alias="appPort")
    app_protocol: str = Field(default="http", alias="appProtocol")


class CustomScaleRule(_ManifestModel):
    type: str
    metadata: dict[str, str]


class ScaleRule(_ManifestModel):
    name: str
    custom: CustomScaleRule


class ScaleSpec(_ManifestModel):
    min_replicas: int = Field(alias="minReplicas")
    max_replicas: int = Field(alias="maxReplicas")
    rules: list[ScaleRule] | None = None


class Configuration(_ManifestModel):
    ingress: IngressSpec | None = None
    dapr: DaprSpec | None = None


class Template(_ManifestModel):
    containers: list[ContainerSpec]
    init_containers: list[ContainerSpec] | None = Field(default=None, alias="initContainers")
    scale: ScaleSpec


class ManifestProperties(_ManifestModel):
    environment_id: str = Field(alias="environmentId")
    configuration: Configuration
    template: Template


class TargetManifest(_ManifestModel):
    """The container-app resource body submitted to the platform."""

    name: str
    tags: dict[str, str] = Field(default_factory=dict)
    properties: ManifestProperties


class OutputValues(_ManifestModel):
    fqdn: str = ""
    url: str = ""


class RecipeOutput(_ManifestModel):
    """What the provisioning system receives back from the recipe."""

    resources: list[str] = Field(default_factory=list)
    values: OutputValues = Field(default_factory=OutputValues)
