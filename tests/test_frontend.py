"""
Frontend tests
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from frontend.app import create_app
from frontend.config import Settings
from frontend.gateway_client import GatewayClient, GatewayResult


@pytest.fixture
def gateway():
    return MagicMock(spec=GatewayClient)


@pytest.fixture
def client(gateway):
    app = create_app(Settings(gateway_url="http://api-gateway:8000", log_format="console"))
    app.config['TESTING'] = True
    app.extensions['gateway_client'] = gateway
    return app.test_client()


class TestFrontendRoutes:
    def test_index(self, client):
        response = client.get('/')
        assert response.status_code == 200
        assert b'action="/signup"' in response.data
        assert b'action="/files"' in response.data

    def test_health(self, client):
        response = client.get('/health')
        assert response.status_code == 200
        assert response.get_json()['status'] == 'healthy'

    def test_signup_success(self, client, gateway):
        gateway.create_account.return_value = GatewayResult(
            ok=True, status_code=201, data={'id': 'acc-1', 'email': 'ada@example.com'}
        )

        response = client.post('/signup', data={'email': 'ada@example.com', 'credential': 'pw'})

        assert response.status_code == 201
        assert b'acc-1' in response.data
        gateway.create_account.assert_called_once_with('ada@example.com', 'pw')

    def test_signup_failure_is_generic(self, client, gateway):
        gateway.create_account.return_value = GatewayResult(
            ok=False, status_code=502, data={'error': True, 'code': 'relay_failure'}
        )

        response = client.post('/signup', data={'email': 'ada@example.com', 'credential': 'pw'})

        assert response.status_code == 502
        assert b'Request failed (502)' in response.data

    def test_files_success(self, client, gateway):
        gateway.create_file_reference.return_value = GatewayResult(
            ok=True, status_code=201,
            data={'id': 'file-1', 'storage_path': 'uploads/ab/abcd-report.pdf'}
        )

        response = client.post('/files', data={'display_name': 'report.pdf', 'owner_id': 'acc-1'})

        assert response.status_code == 201
        assert b'uploads/ab/abcd-report.pdf' in response.data
        gateway.create_file_reference.assert_called_once_with('report.pdf', 'acc-1')

    def test_gateway_unreachable(self, client, gateway):
        gateway.create_file_reference.return_value = GatewayResult(ok=False, status_code=None)

        response = client.post('/files', data={'display_name': 'report.pdf', 'owner_id': 'acc-1'})

        assert response.status_code == 502
        assert b'Request failed (502)' in response.data


class TestGatewayClient:
    def test_create_account_posts_json(self):
        gateway_client = GatewayClient("http://api-gateway:8000/", timeout=3.0)
        response = MagicMock(ok=True, status_code=201)
        response.json.return_value = {'id': 'acc-1'}

        with patch.object(gateway_client.session, 'post', return_value=response) as post:
            result = gateway_client.create_account('ada@example.com', 'pw')

        post.assert_called_once_with(
            'http://api-gateway:8000/api/v1/accounts',
            json={'email': 'ada@example.com', 'credential': 'pw'},
            timeout=3.0
        )
        assert result.ok
        assert result.data == {'id': 'acc-1'}

    def test_error_body_exposes_code(self):
        gateway_client = GatewayClient("http://api-gateway:8000")
        response = MagicMock(ok=False, status_code=502)
        response.json.return_value = {'error': True, 'code': 'relay_failure'}

        with patch.object(gateway_client.session, 'post', return_value=response):
            result = gateway_client.create_file_reference('report.pdf', 'acc-1')

        assert not result.ok
        assert result.error_code == 'relay_failure'

    def test_connection_error(self):
        gateway_client = GatewayClient("http://api-gateway:8000")

        with patch.object(
            gateway_client.session, 'post',
            side_effect=requests.ConnectionError("refused")
        ):
            result = gateway_client.create_account('ada@example.com', 'pw')

        assert not result.ok
        assert result.status_code is None
        assert result.data == {}
