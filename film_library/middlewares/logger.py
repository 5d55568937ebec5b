import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)


def new():
    """Log method, path, client and latency once the rest of the chain is done."""

    async def log_request(request: Request):
        client = request.client.host if request.client else "-"
        start = time.perf_counter()
        try:
            yield
        finally:
            latency = (time.perf_counter() - start) * 1000
            logger.info(f"{request.method} {request.url.path} client={client} latency={latency:.2f}ms")

    return log_request
