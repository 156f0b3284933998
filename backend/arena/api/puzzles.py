from flask import Blueprint, current_app, jsonify, request

from arena.services.puzzles import DIFFICULTIES, generate_puzzle

puzzles = Blueprint('puzzles', __name__)


@puzzles.route('', methods=['GET'])
def get_puzzle():
    difficulty = (request.args.get('difficulty') or 'easy').lower()
    try:
        puzzle = generate_puzzle(difficulty)
    except ValueError:
        return jsonify({
            'error': f"Unknown difficulty '{difficulty}'",
            'difficulties': list(DIFFICULTIES),
        }), 400
    current_app.logger.info(f"[puzzle] difficulty={difficulty}")
    return jsonify({'puzzle': puzzle, 'difficulty': difficulty})
