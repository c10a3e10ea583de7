"""Load runtime settings.

Configuration values are resolved from the environment in `src/config/*` and
exposed here as structured dataclasses for the rest of the server.
"""

from __future__ import annotations

from src.config.server import HOST, PORT, CORS_ORIGINS
from src.config.relay import RELAY_INCLUDE_SENDER, RELAY_REPORT_MALFORMED
from src.config.limits import (
    WS_MESSAGE_WINDOW_SECONDS,
    MAX_CONCURRENT_CONNECTIONS,
    WS_MAX_MESSAGES_PER_WINDOW,
)
from src.config.websocket import (
    WS_ENDPOINT_PATH,
    WS_IDLE_TIMEOUT_S,
    WS_MAX_FRAME_BYTES,
    WS_WATCHDOG_TICK_S,
    WS_MAX_CONNECTION_DURATION_S,
)
from src.config.simulation import (
    SIMULATION_DELAY_S,
    SIMULATION_DEFAULT_TEXT,
    SIMULATION_LATENCY_RANGE_MS,
    SIMULATION_CONFIDENCE_RANGE,
)
from src.state.settings import (
    AppSettings,
    RelaySettings,
    LimitsSettings,
    ServerSettings,
    WebSocketSettings,
    SimulationSettings,
)


def load_settings() -> AppSettings:
    return AppSettings(
        server=ServerSettings(
            host=HOST,
            port=PORT,
            cors_origins=CORS_ORIGINS,
        ),
        websocket=WebSocketSettings(
            endpoint_path=WS_ENDPOINT_PATH,
            max_frame_bytes=WS_MAX_FRAME_BYTES,
            idle_timeout_s=WS_IDLE_TIMEOUT_S,
            watchdog_tick_s=WS_WATCHDOG_TICK_S,
            max_connection_duration_s=WS_MAX_CONNECTION_DURATION_S,
        ),
        relay=RelaySettings(
            include_sender=RELAY_INCLUDE_SENDER,
            report_malformed=RELAY_REPORT_MALFORMED,
        ),
        limits=LimitsSettings(
            max_concurrent_connections=MAX_CONCURRENT_CONNECTIONS,
            ws_message_window_seconds=WS_MESSAGE_WINDOW_SECONDS,
            ws_max_messages_per_window=WS_MAX_MESSAGES_PER_WINDOW,
        ),
        simulation=SimulationSettings(
            delay_s=SIMULATION_DELAY_S,
            default_text=SIMULATION_DEFAULT_TEXT,
            confidence_range=SIMULATION_CONFIDENCE_RANGE,
            latency_range_ms=SIMULATION_LATENCY_RANGE_MS,
        ),
    )


__all__ = ["load_settings"]
