import json
import unittest
from unittest import mock
from apps.common import views


class HealthViewsUnitTests(unittest.TestCase):
    def test_live_health_returns_alive_payload(self):
        response = views.live_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'alive')

    @mock.patch('apps.common.views._cache_check', return_value={'status': 'ok'})
    @mock.patch('apps.common.views._db_check', return_value={'status': 'ok', 'latency_ms': 1.23})
    def test_ready_health_ok_when_dependencies_pass(self, mock_db_check, mock_cache_check):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'ok')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)
        self.assertEqual(payload['checks']['cache'], mock_cache_check.return_value)

    @mock.patch('apps.common.views._cache_check', return_value={'status': 'fail', 'error': 'unreachable'})
    @mock.patch('apps.common.views._db_check', return_value={'status': 'ok', 'latency_ms': 0.5})
    def test_ready_health_degraded_on_cache_failure(self, _mock_db_check, mock_cache_check):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 503)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'degraded')
        self.assertEqual(payload['checks']['cache'], mock_cache_check.return_value)

    @mock.patch('apps.common.views.connections')
    def test_db_check_reports_operational_error(self, mock_connections):
        from django.db.utils import OperationalError

        mock_connections.__getitem__.return_value.cursor.side_effect = OperationalError('down')
        result = views._db_check()
        self.assertEqual(result['status'], 'fail')
        self.assertIn('down', result['error'])
