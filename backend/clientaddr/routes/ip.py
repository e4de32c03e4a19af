from __future__ import annotations

from flask import Blueprint, jsonify

from ..utils.ip import get_client_addr, get_client_real_addr

bp = Blueprint("ip", __name__)


@bp.get("/ip")
def client_ip():
    addr = get_client_addr()
    if addr is None:
        return jsonify({"error": "client_address_unknown"}), 400
    return jsonify(addr.to_dict())


@bp.get("/ip/real")
def client_real_ip():
    addr = get_client_real_addr()
    if addr is None:
        return jsonify({"error": "client_address_unknown"}), 400
    return jsonify(addr.to_dict())
