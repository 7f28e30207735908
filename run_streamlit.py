"""
Launcher script for the YouTube Video Summarizer Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="YouTube Video Summarizer Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--api-url", help="URL of the API server (default: PUBLIC_URL or http://localhost:8000)")
    args = parser.parse_args()

    project_dir = Path(__file__).parent.absolute()
    app_path = project_dir / "ytsummarizer" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()
    api_url = args.api_url or os.getenv("PUBLIC_URL", "http://localhost:8000")
    env["API_URL"] = api_url

    # Add the project root to PYTHONPATH to fix import issues
    env["PYTHONPATH"] = str(project_dir) + os.pathsep + env.get("PYTHONPATH", "")

    print(f"Starting YouTube Video Summarizer Streamlit app on port {args.port}")
    print(f"API server is expected to be running at: {api_url}")

    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except Exception as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
