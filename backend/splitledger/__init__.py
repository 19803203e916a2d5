import logging

from flask import Flask
from flask.logging import default_handler
from flask_cors import CORS

from splitledger.config import Config
from splitledger.extensions import init_ledger


def _configure_logging(app):
    package_logger = logging.getLogger(__name__)
    package_logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    if default_handler not in package_logger.handlers:
        package_logger.addHandler(default_handler)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Disable strict slashes to prevent 308 redirects that break CORS preflight
    app.url_map.strict_slashes = False

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    _configure_logging(app)
    init_ledger(app)

    # Register blueprints
    from splitledger.participants.routes import participants_bp
    from splitledger.expenses.routes import expenses_bp
    from splitledger.payments.routes import bp as payments_bp
    from splitledger.balances.routes import bp as balances_bp

    app.register_blueprint(participants_bp, url_prefix='/api/v1/participants')
    app.register_blueprint(expenses_bp, url_prefix='/api/v1/expenses')
    app.register_blueprint(payments_bp, url_prefix='/api/v1/payments')
    app.register_blueprint(balances_bp, url_prefix='/api/v1/balances')

    from splitledger.commands import ledger_cli
    app.cli.add_command(ledger_cli)

    return app
