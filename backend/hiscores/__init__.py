from flask import Flask, jsonify
from flask_login import LoginManager
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from config import Config

login_manager = LoginManager()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    login_manager.init_app(flask_app)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []))

    # Fresh in-memory state per app instance
    from hiscores.services import Services
    flask_app.extensions['hiscores'] = Services(
        secret_key=flask_app.config['SECRET_KEY'],
        min_length=int(flask_app.config.get('MIN_CREDENTIAL_LENGTH', 6)),
        page_size=int(flask_app.config.get('PAGE_SIZE', 20)),
    )

    # Import and register blueprints here
    from hiscores.auth import auth
    flask_app.register_blueprint(auth)

    from hiscores.api.high_scores import high_scores
    flask_app.register_blueprint(high_scores, url_prefix='/high-scores')

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        # Wrong method on a known path is reported as not found
        code = 404 if exc.code == 405 else exc.code
        message = 'Not found' if exc.code == 405 else exc.name
        return jsonify({'error': message}), code

    return flask_app
