from flask import Flask, jsonify, request
from shamir import ShareError, decode, reconstruct
from recovery.loader import CaseFormatError, parse_case, parse_int
import config

app = Flask(__name__)


@app.errorhandler(ShareError)
@app.errorhandler(CaseFormatError)
def handle_bad_share(error):
    return jsonify({"error": str(error)}), 400


@app.route('/health', methods=['GET'])
def health():
    return jsonify({"status": "ok", "modulus": config.Config.FIELD_PRIME})


@app.route('/decode', methods=['POST'])
def decode_value():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "digits" not in data or "base" not in data:
        return jsonify({"error": "'digits' and 'base' are required"}), 400

    base = parse_int(data["base"], "base", "request")
    value = decode(str(data["digits"]), base)
    # Decimal string: values can exceed JSON number precision
    return jsonify({"value": str(value)})


@app.route('/reconstruct', methods=['POST'])
def reconstruct_secret():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON case object"}), 400

    data = dict(data)
    modulus = data.pop("modulus", config.Config.FIELD_PRIME)
    if isinstance(modulus, bool) or not isinstance(modulus, int) or modulus < 2:
        return jsonify({"error": f"Invalid modulus {modulus!r}"}), 400

    case = parse_case(data, source="request")
    points = [share.to_point() for share in case.select_shares()]
    secret = reconstruct(points, modulus)
    return jsonify({"secret": secret, "k": case.k, "n": case.n})


if __name__ == '__main__':
    app.run(
        host=config.Config.SERVICE_HOST,
        port=config.Config.SERVICE_PORT,
        threaded=True
    )
