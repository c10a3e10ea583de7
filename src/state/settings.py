"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    cors_origins: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    endpoint_path: str
    max_frame_bytes: int
    idle_timeout_s: float
    watchdog_tick_s: float
    max_connection_duration_s: float


@dataclass(frozen=True, slots=True)
class RelaySettings:
    include_sender: bool
    report_malformed: bool


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int
    ws_message_window_seconds: float
    ws_max_messages_per_window: int


@dataclass(frozen=True, slots=True)
class SimulationSettings:
    delay_s: float
    default_text: str
    confidence_range: tuple[float, float]
    latency_range_ms: tuple[float, float]


@dataclass(frozen=True, slots=True)
class AppSettings:
    server: ServerSettings
    websocket: WebSocketSettings
    relay: RelaySettings
    limits: LimitsSettings
    simulation: SimulationSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "RelaySettings",
    "ServerSettings",
    "SimulationSettings",
    "WebSocketSettings",
]
