"""Project-level configuration and path helpers."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

LOGS_DIR.mkdir(parents=True, exist_ok=True)

# LangGraph dev server vs. the packaged deployment
DEV_API_URL = "http://localhost:2024"
PROD_API_URL = "http://localhost:8123"
ASSISTANT_ID = "agent"

# "updates" carries one {node: output} frame per finished node; "events" adds
# the callback stream (on_chain_start / on_chain_end per node). Enabling both
# records every finished stage twice.
DEFAULT_STREAM_MODES = ("values", "updates")

TRANSPORT_LANGGRAPH = "langgraph"
TRANSPORT_SIM = "sim"

MODEL_OPTIONS = [
    {"value": "gemini-2.0-flash", "label": "Gemini 2.0 Flash"},
    {"value": "gemini-2.5-flash-preview-04-17", "label": "Gemini 2.5 Flash"},
    {"value": "gemini-2.5-pro-preview-05-06", "label": "Gemini 2.5 Pro (May)"},
    {"value": "gemini-2.5-pro-preview-06-05", "label": "Gemini 2.5 Pro (June)"},
]

DEFAULT_QUERY_GENERATOR_MODEL = "gemini-2.0-flash"
DEFAULT_REFLECTION_MODEL = "gemini-2.5-flash-preview-04-17"
DEFAULT_ANSWER_MODEL = "gemini-2.5-flash-preview-04-17"

# effort -> (initial queries, research loops)
EFFORT_PRESETS: dict[str, dict[str, int]] = {
    "low": {"queries": 1, "loops": 1},
    "medium": {"queries": 3, "loops": 3},
    "high": {"queries": 5, "loops": 10},
    "custom": {"queries": 3, "loops": 3},
}
DEFAULT_EFFORT = "medium"

MIN_QUERIES = 1
MAX_QUERIES = 10
MIN_LOOPS = 1
MAX_LOOPS = 20


def resolve_api_url(env_value: str | None = None, dev: bool = True) -> str:
    """Resolve LANGGRAPH_API_URL, falling back to the dev or prod default."""
    if env_value:
        return env_value.rstrip("/")
    return DEV_API_URL if dev else PROD_API_URL


def parse_stream_modes(env_value: str | None = None) -> tuple[str, ...]:
    """Parse LANGGRAPH_STREAM_MODES ("values,events"); empty means the default."""
    if not env_value:
        return DEFAULT_STREAM_MODES
    modes = tuple(mode.strip() for mode in env_value.split(",") if mode.strip())
    return modes or DEFAULT_STREAM_MODES
