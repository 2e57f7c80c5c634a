import os
from prometheus_client import Counter, start_http_server
import logging
from .models import init_db, DATABASE_URL

logger = logging.getLogger(__name__)

METRICS_PORT = int(os.getenv('METRICS_PORT', '8001'))

REQUESTS = Counter(
    'blogapi_http_requests_total',
    'HTTP requests handled',
    ['method', 'path', 'status'],
)

def init_metrics(port: int = METRICS_PORT):
    """Initialize Prometheus metrics server"""
    try:
        start_http_server(port)
        logger.info(f"Prometheus metrics server started on port {port}")
    except Exception as e:
        logger.warning(f'Prometheus start failed: {e}')

async def db_startup():
    """Connect to the database and create missing tables.

    Errors propagate so the server refuses to start without storage.
    """
    # strip credentials before logging
    target = DATABASE_URL.rsplit('@', 1)[-1]
    logger.info(f"Connecting to database: {target}")
    await init_db()
    logger.info("Database ready, tables created")
