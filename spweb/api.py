from flask import Flask, jsonify, request

from passcraft.config import request_from_config
from passcraft.errors import GenerationError
from passcraft.evaluator import evaluate_password
from passcraft.generator import generate
from passcraft.suggestions import strength_label

app = Flask(__name__)


@app.errorhandler(GenerationError)
def generation_error(e):
    return jsonify({"error": e.kind, "message": str(e)}), 400


@app.route('/')
def home():
    return jsonify({
        "message": "passcraft API is running"
    })


@app.route('/generate', methods=['POST'])
def generate_route():
    data = request.get_json(silent=True)
    data = dict(data) if isinstance(data, dict) else {}
    ptype = data.pop('type', 'uniform')
    password_request = request_from_config(ptype, overrides=data)
    password = generate(password_request)
    score = evaluate_password(password, password_request.password_type)["score"]
    return jsonify({
        'password': password,
        'type': password_request.password_type.value,
        'score': score,
        'label': strength_label(score, password_request.password_type),
    })


@app.route('/score', methods=['POST'])
def score_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    password = data.get('password', '')
    ptype = data.get('type', 'uniform')
    result = evaluate_password(password, ptype)
    result['label'] = strength_label(result['score'], ptype)
    return jsonify(result)


if __name__ == "__main__":
    app.run(debug=True)
