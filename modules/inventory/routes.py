"""HTTP routes for the caller's inventory items."""

from flask import jsonify
from flask_login import current_user, login_required

from extensions import get_store
from schemas import InventoryDraft, InventoryRead, dump, dump_all, parse_body

from . import bp


@bp.route('', methods=['GET'])
@login_required
def list_inventory():
    items = get_store().list_inventory(current_user.id)
    return jsonify(dump_all(InventoryRead, items))


@bp.route('', methods=['POST'])
@login_required
def create_item():
    draft = parse_body(InventoryDraft)
    item = get_store().create_inventory_item(current_user.id, draft.to_draft())
    return jsonify(dump(InventoryRead, item)), 201
