# app/core/rate_limiter.py

from loguru import logger
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import Settings, settings


def get_real_ip(request) -> str:
    """
    Client IP for rate limiting. Behind Vercel/Nginx the first
    X-Forwarded-For entry is the applicant; Cloudflare sends X-Real-IP.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    return get_remote_address(request)


def submission_limit() -> str:
    # Read per request so the limit follows the current settings
    return settings.SUBMISSION_RATE_LIMIT


def build_limiter(config: Settings) -> Limiter:
    """
    Redis-backed limiter when REDIS_URL is set, in-memory otherwise.
    Managed Redis in prod needs TLS, so redis:// is upgraded to rediss://.
    """
    storage_uri = config.REDIS_URL
    if not storage_uri:
        logger.warning("REDIS_URL not set. Submission rate limits are per process.")
        return Limiter(key_func=get_real_ip)

    if config.ENV == "prod" and storage_uri.startswith("redis://"):
        storage_uri = "rediss://" + storage_uri[len("redis://"):]

    try:
        logger.info("Submission rate limits stored in Redis")
        return Limiter(
            key_func=get_real_ip,
            storage_uri=storage_uri,
            strategy="fixed-window",
            storage_options={"socket_connect_timeout": 5, "retry_on_timeout": True},
        )
    except Exception as e:
        logger.error(f"Redis rate limit storage unavailable, using memory: {e}")
        return Limiter(key_func=get_real_ip)


limiter = build_limiter(settings)
