"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from .dependencies import get_config


def main() -> None:
    """Run the API server with the configured host and port."""
    config = get_config()
    uvicorn.run(
        "src.server.app:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.reload,
        reload_dirs=["src"] if config.server.reload else None,
    )


if __name__ == "__main__":
    main()
