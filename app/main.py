import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core import config
from app.core.deps import get_registry
from app.core.error_handlers import register_error_handlers
from app.core.logging_middleware import LoggingMiddleware
from app.graphql.router import router as graphql_router
from app.registry.registry import Registry
from app.registry.seed import seed_registry
from app.routers.courses import router as courses_router
from app.routers.enrollments import router as enrollments_router
from app.routers.learners import router as learners_router
from app.rpc.server import build_server

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.APP_TITLE)

# Middleware
app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


# Health check
@app.get("/health")
def health(registry: Registry = Depends(get_registry)):
    return {
        "status": "ok",
        "learners": registry.learners.count(),
        "courses": registry.courses.count(),
    }


# Startup event: one registry per process, shared by REST, GraphQL and gRPC
@app.on_event("startup")
def on_startup():
    registry = Registry()
    if config.SEED_FIXTURES:
        seed_registry(registry)
        logger.info(
            "Seeded %s learners and %s courses",
            registry.learners.count(),
            registry.courses.count(),
        )
    app.state.registry = registry

    app.state.rpc_server = None
    if config.RPC_ENABLED:
        server, port = build_server(registry, f"{config.RPC_HOST}:{config.RPC_PORT}")
        server.start()
        app.state.rpc_server = server
        logger.info("gRPC server listening on %s:%s", config.RPC_HOST, port)


@app.on_event("shutdown")
def on_shutdown():
    server = getattr(app.state, "rpc_server", None)
    if server is not None:
        server.stop(grace=1).wait()


# Include routers
app.include_router(learners_router, prefix="/learners", tags=["learners"])
app.include_router(enrollments_router, prefix="/learners", tags=["enrollments"])
app.include_router(courses_router, prefix="/courses", tags=["courses"])
app.include_router(graphql_router, prefix="/graphql", tags=["graphql"])
