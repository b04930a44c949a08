from flask import Blueprint, current_app, jsonify, request
from flask_login import current_user, login_required

from hiscores.auth import read_handle, services
from hiscores.services import InvalidInput

high_scores = Blueprint('high_scores', __name__)


@high_scores.route('', methods=['POST'])
@login_required
def submit_score():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    try:
        entry = services().scores.append(
            data.get('level'),
            read_handle(data),
            data.get('score'),
            data.get('timestamp'),
        )
    except InvalidInput as exc:
        return jsonify({'error': str(exc)}), 400
    current_app.logger.info(
        f"[score] level={entry.level} handle={entry.handle} score={entry.score} by={current_user.handle}"
    )
    return jsonify(entry.to_dict()), 201


@high_scores.route('', methods=['GET'])
def list_scores():
    level = request.args.get('level')
    if not level:
        return jsonify({'error': 'level query parameter is required'}), 400
    page = request.args.get('page', 1, type=int)
    try:
        entries = services().leaderboard(level, page)
        return jsonify([e.to_dict() for e in entries])
    except Exception:
        current_app.logger.exception(f"[query-failed] level={level} page={page}")
        return jsonify({'error': 'Internal server error'}), 500
