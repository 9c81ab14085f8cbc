import logging
import secrets

from flask import Flask, jsonify
from flask_cors import CORS

from config import Config
from errors import register_error_handlers
from routes.auth import auth_bp
from routes.budget import budget_bp
from routes.expenses import expenses_bp
from routes.income import income_bp
from routes.savings import savings_bp
from routes.summary import summary_bp


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    for key in ('SECRET_KEY', 'JWT_SECRET'):
        if not app.config.get(key):
            app.logger.warning("%s is not set; using a random per-process value", key)
            app.config[key] = secrets.token_hex(32)

    config_class.init_db(app)
    CORS(app, origins=app.config.get('CORS_ORIGINS', '*'))
    register_error_handlers(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(budget_bp)
    app.register_blueprint(income_bp)
    app.register_blueprint(expenses_bp)
    app.register_blueprint(savings_bp)
    app.register_blueprint(summary_bp)

    @app.route('/health')
    def health():
        return jsonify(status="ok")

    return app


app = create_app()
