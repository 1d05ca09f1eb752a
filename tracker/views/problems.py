"""Problems blueprint: timeline listing and on-demand editorials."""
from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify

from tracker.errors import TrackerError
from tracker.services.editorial_cache import EditorialCache, is_valid_problem_id
from tracker.services.editorial_service import EditorialService
from tracker.services.timeline_service import get_timeline

logger = logging.getLogger(__name__)

problems_bp = Blueprint('problems', __name__, url_prefix='/problems')


def _error(message, status):
    return jsonify({'error': message}), status


@problems_bp.route('')
def list_problems():
    username = current_app.config.get('TRACKER_USERNAME')
    if not username:
        return _error('No tracker username configured', 500)
    try:
        entries = get_timeline(current_app._get_current_object(), username)
    except TrackerError as e:
        logger.error(f"Error fetching entries for {username}: {e}")
        return _error(f'Error fetching entries: {e}', 500)
    return jsonify({
        'username': username,
        'problems': [entry.to_dict() for entry in entries],
    })


@problems_bp.route('/<problem_id>/generate', methods=['POST'])
def generate_editorial(problem_id):
    if not is_valid_problem_id(problem_id):
        return _error('Invalid problem id', 400)
    logger.info(f"/problems/{problem_id}/generate POST called")
    try:
        service = EditorialService.from_app(current_app)
        payload = service.generate(problem_id)
    except TrackerError as e:
        logger.error(f"Editorial generation failed for {problem_id}: {e}")
        return _error(f'Failed to generate editorial: {e}', 500)
    return jsonify(payload)


@problems_bp.route('/<problem_id>/editorial')
def get_editorial(problem_id):
    if not is_valid_problem_id(problem_id):
        return _error('Invalid problem id', 400)
    try:
        payload = EditorialCache.from_config(current_app.config).get(problem_id)
    except TrackerError as e:
        logger.error(f"Reading editorial for {problem_id} failed: {e}")
        return _error(str(e), 500)
    if payload is None:
        logger.warning(f"Editorial not generated for {problem_id}")
        return _error('Not generated', 404)
    return jsonify(payload)
