from datetime import datetime, timezone
from typing import Optional

from flask import Flask, render_template, request
import structlog

from frontend.config import Settings, get_settings
from frontend.gateway_client import GatewayClient, GatewayResult
from shared.utils.logger import configure_logging

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or get_settings()
    configure_logging(settings.service_name, settings.log_level, settings.log_format)

    app = Flask(__name__)
    app.config['DEBUG'] = settings.debug
    app.extensions['gateway_client'] = GatewayClient(settings.gateway_url, settings.request_timeout)

    def gateway() -> GatewayClient:
        return app.extensions['gateway_client']

    def render_result(action: str, result: GatewayResult):
        if result.ok:
            return render_template('index.html', action=action, record=result.data), result.status_code

        # The gateway hides failure details, so does the page
        status_code = result.status_code or 502
        return render_template(
            'index.html',
            action=action,
            failure=f"Request failed ({status_code})"
        ), status_code

    @app.route('/')
    def index():
        return render_template('index.html')

    @app.route('/signup', methods=['POST'])
    def signup():
        result = gateway().create_account(
            request.form.get('email', ''),
            request.form.get('credential', '')
        )
        logger.info("Signup submitted", ok=result.ok, status_code=result.status_code)
        return render_result('signup', result)

    @app.route('/files', methods=['POST'])
    def files():
        result = gateway().create_file_reference(
            request.form.get('display_name', ''),
            request.form.get('owner_id', '')
        )
        logger.info("File reference submitted", ok=result.ok, status_code=result.status_code)
        return render_result('files', result)

    @app.route('/health')
    def health():
        """Health check endpoint"""
        return {
            'status': 'healthy',
            'service': settings.service_name,
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'version': settings.version
        }

    return app


app = create_app()

if __name__ == '__main__':
    settings = get_settings()
    app.run(host='0.0.0.0', port=settings.port, debug=settings.debug)
