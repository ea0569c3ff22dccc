from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv

from workoutlog.config import Settings
from workoutlog.errors import register_error_handlers
from workoutlog.extensions import db

def create_app(config_name='development', settings=None):
    # Load environment variables
    load_dotenv()
    if settings is None:
        settings = Settings.from_env()

    # Initialize Flask app
    app = Flask(__name__)

    # Configure the app based on environment
    if config_name == 'testing':
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///:memory:'
        app.config['TESTING'] = True
    else:
        app.config['SQLALCHEMY_DATABASE_URI'] = settings.database_url
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = settings.engine_options()

    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['SETTINGS'] = settings
    app.logger.setLevel(settings.log_level)

    # Initialize extensions with app
    db.init_app(app)
    if settings.frontend_origin:
        CORS(app, origins=settings.frontend_origin)
    else:
        CORS(app)

    # Import routes after db initialization to avoid circular imports
    from workoutlog.routes.workouts import workouts_bp
    from workoutlog.routes.bests import bests_bp

    # Register blueprints
    app.register_blueprint(workouts_bp, url_prefix='/api/workouts')
    app.register_blueprint(bests_bp, url_prefix='/api/bests')
    register_error_handlers(app, db)

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({'ok': True})

    # Idempotent: only creates workout_logs if it is missing
    with app.app_context():
        db.create_all()

    return app

def main():
    app = create_app()
    settings = app.config['SETTINGS']
    app.logger.info(f"API running on :{settings.port} | SSL={'on' if settings.database_ssl else 'off'}")
    app.run(host='0.0.0.0', port=settings.port, threaded=True)

if __name__ == '__main__':
    main()
