"""
Input models — the abstract resource description handed to the recipe.

The provisioning system sends a loosely-typed envelope.  These models
pin down its shape: every optional bag defaults to empty, ``null`` is
treated exactly like an absent key, and field names follow the
camelCase vocabulary of the envelope through aliases.

Fields the target platform cannot represent (volumes, working directory,
restart policy, termination grace period) are still accepted here so the
envelope validates; they are simply never projected.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def as_text(value: Any) -> str:
    """Coerce an envelope value to its text form.

    Strings pass through; everything else is JSON-encoded, so ``8080``
    becomes ``"8080"``, ``True`` becomes ``"true"`` and nested bags keep
    a readable (if lossy) rendition.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=False, separators=(",", ":"), default=str)


class _EnvelopeModel(BaseModel):
    """Base for all envelope models: frozen, alias-aware, nulls dropped."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# ── Environment variables ───────────────────────────────────────


class SecretReference(_EnvelopeModel):
    """Pointer to a value held in an external secret store."""

    source: str = ""
    key: str = ""


class EnvValueFrom(_EnvelopeModel):
    secret_ref: SecretReference | None = Field(default=None, alias="secretRef")


class EnvironmentVariable(_EnvelopeModel):
    """One container env entry: a literal value or an external reference."""

    value: str | None = None
    value_from: EnvValueFrom | None = Field(default=None, alias="valueFrom")

    @field_validator("value", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> Any:
        return as_text(v) if v is not None else v

    @property
    def is_literal(self) -> bool:
        return self.value_from is None and self.value is not None


# ── Resources / ports / probes ──────────────────────────────────


class ResourceQuantity(_EnvelopeModel):
    """CPU in decimal cores (``"0.5"``) and memory in whole MiB."""

    cpu: float | None = None
    memory_in_mib: int | None = Field(default=None, alias="memoryInMib")


class ContainerResources(_EnvelopeModel):
    requests: ResourceQuantity | None = None
    limits: ResourceQuantity | None = None


class ContainerPort(_EnvelopeModel):
    container_port: int = Field(alias="containerPort")
    protocol: str | None = None


class HttpGetAction(_EnvelopeModel):
    port: int | None = None
    path: str | None = None
    scheme: str | None = None


class TcpSocketAction(_EnvelopeModel):
    port: int | None = None


class ExecAction(_EnvelopeModel):
    command: list[str] = Field(default_factory=list)


class ProbeDefinition(_EnvelopeModel):
    """A liveness or readiness check as declared on the container."""

    http_get: HttpGetAction | None = Field(default=None, alias="httpGet")
    tcp_socket: TcpSocketAction | None = Field(default=None, alias="tcpSocket")
    exec_action: ExecAction | None = Field(default=None, alias="exec")

    initial_delay_seconds: int | None = Field(default=None, alias="initialDelaySeconds")
    period_seconds: int | None = Field(default=None, alias="periodSeconds")
    timeout_seconds: int | None = Field(default=None, alias="timeoutSeconds")
    failure_threshold: int | None = Field(default=None, alias="failureThreshold")
    success_threshold: int | None = Field(default=None, alias="successThreshold")


class ContainerDefinition(_EnvelopeModel):
    """One entry of the ``containers`` bag."""

    image: str = Field(min_length=1)
    command: list[str] | None = None
    args: list[str] | None = None
    env: dict[str, EnvironmentVariable] = Field(default_factory=dict)
    resources: ContainerResources | None = None
    ports: dict[str, ContainerPort] = Field(default_factory=dict)
    liveness_probe: ProbeDefinition | None = Field(default=None, alias="livenessProbe")
    readiness_probe: ProbeDefinition | None = Field(default=None, alias="readinessProbe")
    init_container: bool = Field(default=False, alias="initContainer")

    # Accepted, never projected — see core.services.unsupported
    volumes: dict[str, Any] | None = None
    working_dir: str | None = Field(default=None, alias="workingDir")
    restart_policy: str | None = Field(default=None, alias="restartPolicy")
    termination_grace_period_seconds: int | None = Field(
        default=None, alias="terminationGracePeriodSeconds",
    )

    @field_validator("env", mode="before")
    @classmethod
    def _scalar_env(cls, v: Any) -> Any:
        # NAME: "value" is shorthand for NAME: {value: "value"}
        if isinstance(v, dict):
            return {
                k: item if isinstance(item, dict) else {"value": item}
                for k, item in v.items()
                if item is not None
            }
        return v


# ── Connections / scaling / extensions ──────────────────────────


class ConnectionDefinition(_EnvelopeModel):
    source: str = ""
    disable_default_env_vars: bool = Field(default=False, alias="disableDefaultEnvVars")


class MetricTarget(_EnvelopeModel):
    average_utilization: int | None = Field(default=None, alias="averageUtilization")


class ScaleMetric(_EnvelopeModel):
    """One autoscaling metric; only cpu and memory are translated."""

    kind: str
    target: MetricTarget | None = None


class AutoScaling(_EnvelopeModel):
    max_replicas: int | None = Field(default=None, alias="maxReplicas")
    metrics: list[ScaleMetric] = Field(default_factory=list)


class DaprSidecarExtension(_EnvelopeModel):
    app_id: str | None = Field(default=None, alias="appId")
    app_port: int | None = Field(default=None, alias="appPort")


class Extensions(_EnvelopeModel):
    dapr_sidecar: DaprSidecarExtension | None = Field(default=None, alias="daprSidecar")


class ResourceProperties(_EnvelopeModel):
    containers: dict[str, ContainerDefinition] = Field(default_factory=dict)
    connections: dict[str, ConnectionDefinition] = Field(default_factory=dict)
    extensions: Extensions = Field(default_factory=Extensions)
    replicas: int | None = None
    auto_scaling: AutoScaling | None = Field(default=None, alias="autoScaling")


# ── Envelope ────────────────────────────────────────────────────


class ResourceDescription(_EnvelopeModel):
    name: str = ""
    id: str = ""
    properties: ResourceProperties = Field(default_factory=ResourceProperties)
    connections: dict[str, dict[str, Any]] = Field(default_factory=dict)


class NamedRef(_EnvelopeModel):
    name: str = ""
    id: str = ""


class RecipeEnvelope(_EnvelopeModel):
    """The raw recipe context as sent by the provisioning system."""

    resource: ResourceDescription = Field(default_factory=ResourceDescription)
    application: NamedRef | None = None
    environment: NamedRef | None = None


class ResourceContext(BaseModel):
    """Normalized view of the envelope, with every derived name resolved.

    Built once by ``normalize_context`` and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    id: str = ""
    application_name: str = ""
    environment_id: str = ""
    properties: ResourceProperties = Field(default_factory=ResourceProperties)
    connections: dict[str, dict[str, Any]] = Field(default_factory=dict)

    normalized_name: str
    unique_suffix: str
    platform_name: str
    environment_label: str = ""

    @property
    def containers(self) -> dict[str, ContainerDefinition]:
        return self.properties.containers
