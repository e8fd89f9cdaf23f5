"""
Main Flask Application for the Esports Management Platform

This is the entry point of the application.
Demonstrates: APPLICATION FACTORY PATTERN

Author: Esports Platform Team
Purpose: Initialize and configure the Flask application
"""

import logging
import os

from flask import Flask, jsonify
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from config import get_config
from models import db
from extensions import compress, cors


def create_app(config_name='default'):
    """
    Application Factory Function

    Args:
        config_name (str): Configuration name ('development', 'production', 'testing')

    Returns:
        Flask: Configured Flask application
    """
    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    app.json.sort_keys = False

    logging.basicConfig(level=app.config['LOG_LEVEL'])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    compress.init_app(app)
    cors.init_app(
        app,
        origins=app.config['CORS_ORIGINS'],
        methods=app.config['CORS_METHODS'],
        allow_headers=app.config['CORS_HEADERS'],
        supports_credentials=True,
    )

    from managers import leaderboard_manager
    leaderboard_manager.init_app(app)

    # Register blueprints (routes)
    from routes import main_bp, api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix='/api')

    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors"""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors"""
        db.session.rollback()  # Rollback any failed database transactions
        return jsonify({'error': 'Internal server error'}), 500

    # Create database tables
    with app.app_context():
        db.create_all()

        if app.config.get('SEED_SAMPLE_DATA'):
            from init_db import seed_sample_data
            seed_sample_data()

    return app


if __name__ == '__main__':
    # Get configuration from environment variable or use default
    config_name = os.environ.get('FLASK_ENV', 'development')

    app = create_app(config_name)

    # In production, use a WSGI server like Gunicorn
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 3000)),
        debug=app.config.get('DEBUG', False)
    )
