from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Sudoku Arena relay server!'})


@main.route('/health')
def health():
    return jsonify({'status': 'ok'})


@main.route('/api/rooms/stats')
def room_stats():
    return jsonify(current_app.extensions['arena'].lifecycle.stats())
