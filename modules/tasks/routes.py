"""HTTP routes for the caller's tasks."""

from flask import abort, jsonify
from flask_login import current_user, login_required

from extensions import get_store
from schemas import TaskDraft, TaskRead, dump, dump_all, parse_body

from . import bp


@bp.route('', methods=['GET'])
@login_required
def list_tasks():
    tasks = get_store().list_tasks(current_user.id)
    return jsonify(dump_all(TaskRead, tasks))


@bp.route('', methods=['POST'])
@login_required
def create_task():
    draft = parse_body(TaskDraft)
    task = get_store().create_task(current_user.id, draft.to_draft())
    return jsonify(dump(TaskRead, task)), 201


@bp.route('/<int:task_id>/complete', methods=['PATCH'])
@login_required
def complete_task(task_id: int):
    # someone else's task is reported exactly like a missing one
    task = get_store().complete_task(current_user.id, task_id)
    if task is None:
        abort(404)
    return jsonify(dump(TaskRead, task))
