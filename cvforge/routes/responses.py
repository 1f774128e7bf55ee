from flask import jsonify


def ok(data=None, message=None, status=200, **extra):
    payload = {"status": "success"}
    if data is not None:
        payload["data"] = data
    if message:
        payload["message"] = message
    payload.update(extra)
    return jsonify(payload), status


def created(data, message=None):
    return ok(data, message, status=201)
