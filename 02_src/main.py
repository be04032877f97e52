"""Main entry point for Research Console."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from research_console.api import create_fastapi_app
from research_console.app import Application, langgraph_transport_factory
from research_console.config import TRANSPORT_LANGGRAPH, TRANSPORT_SIM
from research_console.logging_config import setup_logging
from sim import Sim


def build_application() -> Application:
    """Pick the transport named by TRANSPORT (langgraph or sim)."""
    transport = os.getenv("TRANSPORT", TRANSPORT_LANGGRAPH)

    if transport == TRANSPORT_SIM:
        shape = os.getenv("SIM_SHAPE", "updates")
        delay = float(os.getenv("SIM_DELAY", "0.5"))
        return Application(transport_factory=lambda bus: Sim(bus, shape=shape, delay=delay))
    if transport == TRANSPORT_LANGGRAPH:
        return Application(transport_factory=langgraph_transport_factory())
    raise ValueError(f"Unknown TRANSPORT: {transport}")


def main():
    """Run the application."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8000"))

    app = create_fastapi_app(build_application())

    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
