import logging
import os
from pathlib import Path
from dotenv import load_dotenv

logger = logging.getLogger("ewtrack.wsgi")

# Try .env.local first (for local development), then fall back to .env
base_path = Path(__file__).parent
dotenv_local = base_path / '.env.local'
dotenv_default = base_path / '.env'

if dotenv_local.exists():
    load_dotenv(dotenv_local)
    env_source = str(dotenv_local)
elif dotenv_default.exists():
    load_dotenv(dotenv_default)
    env_source = str(dotenv_default)
else:
    env_source = None

# Config reads the environment at import time, so import after load_dotenv
from ewtrack import create_app  # noqa: E402

app = create_app()

if env_source:
    logger.info("Loaded environment from: %s", env_source)
else:
    logger.warning("No .env or .env.local file found. Using system environment variables.")

if __name__ == "__main__":
    app.run(debug=os.environ.get("FLASK_DEBUG") == "1")
