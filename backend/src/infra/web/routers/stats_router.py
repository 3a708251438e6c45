import os
import time
from datetime import datetime
from typing import Any

import psutil
from fastapi import APIRouter, Response, status

from infra.config.config import get_config
from infra.utils.formatters import format_file_size, format_short_elapsed_time
from infra.web.deps import get_default_localizer

router = APIRouter(prefix="/stats", tags=["Stats"])

_start_time: float = time.time()
_current_process: psutil.Process = psutil.Process(os.getpid())


@router.get(
    "/health",
    response_model=dict[str, Any],
    status_code=status.HTTP_200_OK,
    summary="Get application health status",
)
async def get_health(response: Response):
    config = get_config()

    try:
        localizer = get_default_localizer()

        uptime_millis = int((time.time() - _start_time) * 1000)
        memory_info = _current_process.memory_full_info()

        return {
            "status": "UP",
            "uptime": format_short_elapsed_time(localizer, uptime_millis),
            "app_name": config.APP_NAME,
            "version": config.VERSION,
            "ram": format_file_size(localizer, memory_info.rss),
            "cpu_percent": _current_process.cpu_percent(interval=0.1),
            "timestamp": datetime.now(),
        }

    except Exception as e:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

        return {
            "status": "DEGRADED",
            "error": str(e),
            "timestamp": time.time(),
        }
