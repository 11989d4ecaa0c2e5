import logging
from concurrent import futures

import grpc

from app.core.config import LOG_LEVEL, RPC_HOST, RPC_MAX_WORKERS, RPC_PORT, SEED_FIXTURES
from app.registry.registry import Registry
from app.registry.seed import seed_registry
from app.rpc.service import AcademicServicer

logger = logging.getLogger(__name__)


def build_server(
    registry: Registry,
    address: str = f"{RPC_HOST}:{RPC_PORT}",
    max_workers: int = RPC_MAX_WORKERS,
) -> tuple[grpc.Server, int]:
    """Create (but do not start) a gRPC server bound to ``address``.

    Returns the server and the port actually bound, which differs from the
    requested one when ``address`` ends in ``:0``.
    """
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers))
    server.add_generic_rpc_handlers((AcademicServicer(registry).handler(),))
    port = server.add_insecure_port(address)
    if port == 0:
        raise RuntimeError(f"Could not bind gRPC server to {address}")
    return server, port


def main() -> None:
    """Run the RPC surface alone, with its own registry."""
    logging.basicConfig(level=LOG_LEVEL)

    registry = Registry()
    if SEED_FIXTURES:
        seed_registry(registry)

    server, port = build_server(registry)
    server.start()
    logger.info("gRPC server listening on %s:%s", RPC_HOST, port)
    try:
        server.wait_for_termination()
    except KeyboardInterrupt:
        server.stop(grace=None)


if __name__ == "__main__":
    main()
