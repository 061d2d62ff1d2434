from django.http import JsonResponse
from django.core.cache import cache
from django.db import connections
from django.db.utils import OperationalError
import time
import uuid
from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _cache_check():
    probe_key = f'health:{uuid.uuid4().hex}'
    try:
        cache.set(probe_key, 'ok', timeout=5)
        value = cache.get(probe_key)
        cache.delete(probe_key)
    except Exception as e:  # pragma: no cover - backend specific failures
        logger.warning('Cache health check failed', error=str(e))
        return {'status': 'fail', 'error': str(e)}
    if value != 'ok':
        # django-redis swallows connection errors, so a miss means the backend is down
        logger.warning('Cache health check could not read back probe key')
        return {'status': 'fail', 'error': 'probe key not readable'}
    logger.debug('Cache health check succeeded')
    return {'status': 'ok'}


def _db_check(alias='default'):
    started = time.time()
    try:
        conn = connections[alias]
        conn.cursor().execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the database and the cache.

    Geocoding, payment and PDF providers are not probed; the
    storefront degrades around them instead of refusing traffic.
    """
    checks = {
        'database': _db_check(),
        'cache': _cache_check(),
    }
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse({'status': overall_status, 'checks': checks}, status=http_status)
