"""AppSettings builder with test-friendly defaults."""

from __future__ import annotations

from src.state.settings import (
    AppSettings,
    RelaySettings,
    LimitsSettings,
    ServerSettings,
    WebSocketSettings,
    SimulationSettings,
)


def make_settings(
    *,
    include_sender: bool = True,
    report_malformed: bool = True,
    max_connections: int = 0,
    max_messages_per_window: int = 0,
    message_window_seconds: float = 60.0,
    max_frame_bytes: int = 1024 * 1024,
    idle_timeout_s: float = 0.0,
    watchdog_tick_s: float = 0.02,
    max_connection_duration_s: float = 0.0,
    simulation_delay_s: float = 0.0,
) -> AppSettings:
    return AppSettings(
        server=ServerSettings(host="127.0.0.1", port=3001, cors_origins=("*",)),
        websocket=WebSocketSettings(
            endpoint_path="/",
            max_frame_bytes=max_frame_bytes,
            idle_timeout_s=idle_timeout_s,
            watchdog_tick_s=watchdog_tick_s,
            max_connection_duration_s=max_connection_duration_s,
        ),
        relay=RelaySettings(include_sender=include_sender, report_malformed=report_malformed),
        limits=LimitsSettings(
            max_concurrent_connections=max_connections,
            ws_message_window_seconds=message_window_seconds,
            ws_max_messages_per_window=max_messages_per_window,
        ),
        simulation=SimulationSettings(
            delay_s=simulation_delay_s,
            default_text="Sample transcription text",
            confidence_range=(0.7, 1.0),
            latency_range_ms=(50.0, 150.0),
        ),
    )


__all__ = ["make_settings"]
