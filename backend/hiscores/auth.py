from flask import Blueprint, current_app, jsonify, request

from hiscores import login_manager
from hiscores.models import Player
from hiscores.services import InvalidInput

auth = Blueprint('auth', __name__)

HANDLE_KEYS = ('userHandle', 'handle')
LOGIN_FIELDS = 2


def services():
    return current_app.extensions['hiscores']


def read_handle(data):
    for key in HANDLE_KEYS:
        if key in data:
            return data[key]
    return None


def bearer_token(req):
    header = req.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer':
        return None
    return token.strip() or None


@login_manager.request_loader
def load_player_from_request(req):
    handle = services().tokens.validate(bearer_token(req))
    if handle is None:
        return None
    return Player(handle)


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'error': 'Missing or invalid token'}), 401


@auth.route('/signup', methods=['POST'])
def signup():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    try:
        identity = services().credentials.register(read_handle(data), data.get('password'))
    except InvalidInput as exc:
        return jsonify({'error': str(exc)}), 400
    current_app.logger.info(f"[signup] handle={identity.handle}")
    return jsonify({'message': 'User registered successfully'}), 201


@auth.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    handle = read_handle(data)
    password = data.get('password')
    if not handle or not password:
        return jsonify({'error': 'Missing userHandle or password'}), 400
    if not isinstance(handle, str) or not isinstance(password, str):
        return jsonify({'error': 'userHandle and password must be strings'}), 400
    if len(data) != LOGIN_FIELDS:
        return jsonify({'error': 'Unexpected fields in request body'}), 400

    svc = services()
    # Token is minted for the stored identity, then disclosed only on a match
    token = svc.tokens.issue(svc.credentials.current_handle)
    if not svc.credentials.verify(handle, password):
        current_app.logger.info(f"[login-denied] handle={handle}")
        return jsonify({'error': 'Invalid username or password'}), 401
    current_app.logger.info(f"[login] handle={handle}")
    return jsonify({'jsonWebToken': token, 'token': token})
