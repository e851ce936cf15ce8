from flask import Blueprint, jsonify, request

from wakerace.services import race

participants = Blueprint('participants', __name__)


@participants.route('/<string:participant_id>', methods=['GET'])
def get_participant(participant_id):
    return jsonify(race.get_participant(participant_id).to_dict())


@participants.route('/<string:participant_id>/comment', methods=['POST'])
def send_comment(participant_id):
    data = request.get_json(silent=True) or {}
    participant = race.set_comment(participant_id, data.get('comment'))
    return jsonify(participant.to_dict())
