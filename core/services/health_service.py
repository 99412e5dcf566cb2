"""Health check service with short-lived result caching."""

import time
from datetime import UTC, datetime

import structlog
from django.core.cache import cache
from django.db import DatabaseError, connection

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    HealthCheckResponse,
    LivenessResponse,
    ReadinessResponse,
)

logger = structlog.get_logger(__name__)

CACHE_HEALTH_KEY = "__health_check__"


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(self, version: str, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            version: Service version reported by the health endpoints
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.version = version
        self.cache_ttl_seconds = cache_ttl_seconds
        self._db_health_cache: DependencyHealth | None = None
        self._db_health_cache_time: float = 0.0
        self._cache_health_cache: DependencyHealth | None = None
        self._cache_health_cache_time: float = 0.0

    def reset(self) -> None:
        """Forget cached results so the next check hits the dependencies."""
        self._db_health_cache = None
        self._db_health_cache_time = 0.0
        self._cache_health_cache = None
        self._cache_health_cache_time = 0.0

    def get_health_status(self) -> HealthCheckResponse:
        """Summarize service health around database connectivity.

        Returns:
            HealthCheckResponse, status 'healthy' only when the database is up
        """
        db_health = self.check_database_health()
        return HealthCheckResponse(
            status=(
                HealthStatus.HEALTHY.value
                if db_health.healthy
                else HealthStatus.UNHEALTHY.value
            ),
            timestamp=datetime.now(UTC),
            database=(
                HealthStatus.CONNECTED.value
                if db_health.healthy
                else HealthStatus.DISCONNECTED.value
            ),
            version=self.version,
        )

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always returns alive).

        Returns:
            LivenessResponse with status "alive"
        """
        return LivenessResponse(status="alive")

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with database and cache health checks.

        The service is not ready without its database. A cache outage only
        degrades it: rate limiting fails open and the API keeps serving.

        Returns:
            ReadinessResponse with overall status and dependency health
        """
        db_health = self.check_database_health()
        cache_health = self.check_cache_health()

        if not db_health.healthy:
            ready, degraded, service_status = False, True, "not ready"
        elif not cache_health.healthy:
            ready, degraded, service_status = True, True, "degraded"
        else:
            ready, degraded, service_status = True, False, "ready"

        return ReadinessResponse(
            ready=ready,
            status=service_status,
            degraded=degraded,
            version=self.version,
            dependencies={"database": db_health, "cache": cache_health},
        )

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity with caching.

        Uses Django's ensure_connection() for socket validation without
        executing queries. Results are cached for cache_ttl_seconds.

        Returns:
            DependencyHealth with database status
        """
        current_time = time.time()
        if (
            self._db_health_cache is not None
            and (current_time - self._db_health_cache_time) < self.cache_ttl_seconds
        ):
            return self._db_health_cache

        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
            new_health = DependencyHealth(
                healthy=True,
                status=HealthStatus.HEALTHY,
                message="Database connection successful",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            if self._db_health_cache is not None and not self._db_health_cache.healthy:
                logger.info("Database connection recovered")
        except DatabaseError as e:
            new_health = DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            if self._db_health_cache is None or self._db_health_cache.healthy:
                logger.warning("Database connection lost", error=str(e))

        self._db_health_cache = new_health
        self._db_health_cache_time = current_time
        return new_health

    def check_cache_health(self) -> DependencyHealth:
        """Check cache connectivity with caching.

        Writes and reads back a sentinel key. Results are cached for
        cache_ttl_seconds.

        Returns:
            DependencyHealth with cache status
        """
        current_time = time.time()
        if (
            self._cache_health_cache is not None
            and (current_time - self._cache_health_cache_time)
            < self.cache_ttl_seconds
        ):
            return self._cache_health_cache

        start_time = time.perf_counter()
        try:
            cache.set(CACHE_HEALTH_KEY, "ok", timeout=1)
            result = cache.get(CACHE_HEALTH_KEY)
            response_time_ms = (time.perf_counter() - start_time) * 1000
            if result == "ok":
                new_health = DependencyHealth(
                    healthy=True,
                    status=HealthStatus.HEALTHY,
                    message="Cache connection successful",
                    response_time_ms=response_time_ms,
                )
            else:
                new_health = DependencyHealth(
                    healthy=False,
                    status=HealthStatus.UNHEALTHY,
                    message="Cache health check failed: unexpected result",
                    response_time_ms=response_time_ms,
                )
        except Exception as e:
            # Backend-specific errors (redis.ConnectionError etc.) share no base
            new_health = DependencyHealth(
                healthy=False,
                status=HealthStatus.ERROR,
                message=f"Cache connection failed: {e!s}",
                response_time_ms=(time.perf_counter() - start_time) * 1000,
            )
            logger.warning("Cache health check failed", error=str(e))

        self._cache_health_cache = new_health
        self._cache_health_cache_time = current_time
        return new_health
