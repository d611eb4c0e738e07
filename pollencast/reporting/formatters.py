"""Output formatters for forecasts and screen states."""

import json

from pollencast.models.forecast import ForecastEntity
from pollencast.models.state import Failed, Loaded, ScreenState


def format_forecast_text(f: ForecastEntity) -> str:
    """Plain text table, one row per hour."""
    species = f.species
    lines = [
        f"=== Pollen Forecast ({f.latitude:.2f}, {f.longitude:.2f}) | "
        f"{f.elevation:.0f} m | {f.timezone} ===",
    ]
    header = "Time              " + "".join(f"{s.value:>10}" for s in species)
    lines.append(header)
    for h in f.hours:
        cells = "".join(
            f"{_fmt_value(h.concentrations.get(s)):>10}" for s in species
        )
        lines.append(f"{h.timestamp:%Y-%m-%d %H:%M}  {cells}")

    peaks = []
    for s in species:
        peak = f.peak(s)
        if peak is not None:
            unit = f.units.get(s, "")
            peaks.append(f"{s.value} {peak[1]:.1f}{' ' + unit if unit else ''} "
                         f"at {peak[0]:%H:%M}")
    if peaks:
        lines.append("Peak: " + ", ".join(peaks))
    return "\n".join(lines)


def forecast_to_dict(f: ForecastEntity) -> dict:
    return {
        "latitude": f.latitude,
        "longitude": f.longitude,
        "elevation": f.elevation,
        "timezone": f.timezone,
        "units": {s.value: u for s, u in f.units.items()},
        "hours": [
            {
                "time": h.timestamp.isoformat(),
                "concentrations": {
                    s.value: v for s, v in h.concentrations.items()
                },
            }
            for h in f.hours
        ],
    }


def state_to_dict(state: ScreenState) -> dict:
    data: dict = {"status": state.status.value}
    if isinstance(state, Loaded):
        data["forecast"] = forecast_to_dict(state.forecast)
    elif isinstance(state, Failed):
        data["failure"] = {
            "kind": state.failure.kind.value,
            "message": state.failure.message,
            "status_code": state.failure.status_code,
        }
    return data


def format_forecast_json(f: ForecastEntity) -> str:
    """JSON forecast for programmatic consumption."""
    return json.dumps(forecast_to_dict(f), indent=2)


def format_state_text(state: ScreenState) -> str:
    if isinstance(state, Loaded):
        return format_forecast_text(state.forecast)
    if isinstance(state, Failed):
        code = f" (HTTP {state.failure.status_code})" if state.failure.status_code else ""
        return f"Forecast unavailable [{state.failure.kind}]{code}: {state.failure.message}"
    return f"Forecast {state.status}"


def _fmt_value(value: float | None) -> str:
    return "-" if value is None else f"{value:.1f}"
