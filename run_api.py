"""
FastAPI server entry point for the YouTube Video Summarizer.
"""

import argparse

import uvicorn

from ytsummarizer.config import APP_NAME, APP_VERSION, load_config


def main():
    """Run the FastAPI server."""
    config = load_config()

    # Parse command line arguments
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=config.port, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    # Print startup info
    print(f"Starting {APP_NAME} API server v{APP_VERSION}")
    print(f"Environment: {config.environment}")
    print(f"Binding to: {args.host}:{args.port}")

    # Run the server
    uvicorn.run(
        "ytsummarizer.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
