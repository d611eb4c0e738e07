"""Pollen forecast dashboard: FastAPI backend exposing the screen state + refresh."""

import threading
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pollencast.config.defaults import DEFAULT_LOCATION
from pollencast.config.loader import load_config
from pollencast.config.schema import AppConfig
from pollencast.models.common import utc_now_iso
from pollencast.models.state import Failed, Loaded
from pollencast.reporting.formatters import state_to_dict
from pollencast.state.container import ForecastStateContainer, build_container

CONFIG_PATH = Path(__file__).parent.parent / "ops" / "configs" / "default.yaml"


def create_app(container: ForecastStateContainer) -> FastAPI:
    app = FastAPI(title="Pollen Forecast Dashboard", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Only one fetch cycle at a time; FastAPI runs sync handlers in a pool.
    # Reads take no lock so Loading stays visible while a request is in flight.
    refresh_lock = threading.Lock()

    @app.get("/api/state")
    def get_state():
        """Current screen state."""
        return state_to_dict(container.state)

    @app.post("/api/refresh")
    def refresh():
        """Run a fetch cycle and return the settled state."""
        with refresh_lock:
            return state_to_dict(container.fetch())

    @app.get("/api/health")
    def get_health():
        state = container.state
        return {
            "status": state.status.value,
            "has_forecast": isinstance(state, Loaded),
            "last_failure": state.failure.kind.value
            if isinstance(state, Failed)
            else None,
            "timestamp": utc_now_iso(),
        }

    return app


def _load_config() -> AppConfig:
    if CONFIG_PATH.exists():
        return load_config(CONFIG_PATH)
    return AppConfig(location=DEFAULT_LOCATION)


app = create_app(build_container(_load_config()))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
