"""
Production server runner for the product category page.

Runs Uvicorn with multiple workers. Tables are created by the application's
startup hook, so no separate setup step is needed.
"""
import multiprocessing
import os

import uvicorn

# Formula: (2 x $num_cores) + 1, kept between 2 and 8 workers
CPU_COUNT = multiprocessing.cpu_count()
DEFAULT_WORKERS = min(max(2 * CPU_COUNT + 1, 2), 8)

# Configuration from environment variables
WORKERS = int(os.getenv('UVICORN_WORKERS', DEFAULT_WORKERS))
HOST = os.getenv('API_HOST', '0.0.0.0')
PORT = int(os.getenv('API_PORT', '8000'))
RELOAD = os.getenv('RELOAD', 'false').lower() == 'true'

BACKLOG = int(os.getenv('BACKLOG', '2048'))
TIMEOUT_KEEP_ALIVE = int(os.getenv('TIMEOUT_KEEP_ALIVE', '5'))
LIMIT_CONCURRENCY = int(os.getenv('LIMIT_CONCURRENCY', '1000'))
LIMIT_MAX_REQUESTS = int(os.getenv('LIMIT_MAX_REQUESTS', '10000'))

if __name__ == "__main__":
    print(f"""
Product Category page - production mode

Configuration:
  * Workers: {WORKERS} (CPU cores: {CPU_COUNT})
  * Host: {HOST}
  * Port: {PORT}
  * Backlog: {BACKLOG} pending connections
  * Max concurrency: {LIMIT_CONCURRENCY} requests
  * Keep-alive timeout: {TIMEOUT_KEEP_ALIVE}s

Starting server...
""")

    uvicorn.run(
        "main:create_fastapi_app",
        factory=True,
        host=HOST,
        port=PORT,
        workers=WORKERS,
        reload=RELOAD,
        backlog=BACKLOG,
        timeout_keep_alive=TIMEOUT_KEEP_ALIVE,
        limit_concurrency=LIMIT_CONCURRENCY,
        limit_max_requests=LIMIT_MAX_REQUESTS,
        log_level="info",
        access_log=True,
    )
