from flask import Blueprint, jsonify
from sqlalchemy import text

from wakerace import db
from wakerace.session_store import SessionCredentialStore

main = Blueprint('main', __name__)


@main.route('/health', methods=['GET'])
def health():
    db.session.execute(text('SELECT 1'))
    return jsonify({'status': 'ok'})


@main.route('/session', methods=['GET'])
def list_credentials():
    """Rooms this browser has joined, with the participant id held for each."""
    return jsonify({'credentials': SessionCredentialStore().all()})
