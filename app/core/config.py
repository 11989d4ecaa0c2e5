import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


APP_TITLE = os.getenv("APP_TITLE", "Academic Registry")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Load the example dataset (3 courses, 2 learners) on startup
SEED_FIXTURES = _flag("SEED_FIXTURES", "true")

# gRPC surface, started next to the web app and sharing its registry
RPC_ENABLED = _flag("RPC_ENABLED", "true")
RPC_HOST = os.getenv("RPC_HOST", "0.0.0.0")
RPC_PORT = int(os.getenv("RPC_PORT", "50051"))
RPC_MAX_WORKERS = int(os.getenv("RPC_MAX_WORKERS", "10"))
RPC_SERVICE_NAME = "academic.AcademicService"

# uuid4 collisions before giving up on issuing an id
ID_MAX_ATTEMPTS = int(os.getenv("ID_MAX_ATTEMPTS", "8"))

# Comma-separated origins allowed to call the REST and GraphQL surfaces from a browser
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
