from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from config import config

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()

def create_app(config_name='development'):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    CORS(app)

    # Import models
    from health_tracker.models import HealthEntryRecord

    # Register blueprints
    from health_tracker.routes.entries import entries_bp
    app.register_blueprint(entries_bp, url_prefix='/api')

    # Make sure the entries table exists before serving requests
    with app.app_context():
        db.create_all()
        app.logger.info("Database tables initialized")

    # Health check endpoint
    @app.route('/api/health')
    def health_check():
        return {'status': 'healthy', 'message': 'Health Progress Tracker API is running'}

    return app
