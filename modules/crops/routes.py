"""HTTP routes for the caller's crops."""

from flask import jsonify
from flask_login import current_user, login_required

from extensions import get_store
from schemas import CropDraft, CropRead, dump, dump_all, parse_body

from . import bp


@bp.route('', methods=['GET'])
@login_required
def list_crops():
    crops = get_store().list_crops(current_user.id)
    return jsonify(dump_all(CropRead, crops))


@bp.route('', methods=['POST'])
@login_required
def create_crop():
    draft = parse_body(CropDraft)
    crop = get_store().create_crop(current_user.id, draft.to_draft())
    return jsonify(dump(CropRead, crop)), 201
