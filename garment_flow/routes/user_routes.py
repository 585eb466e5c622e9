from flask import Blueprint

from garment_flow.middleware.auth_middleware import token_required, role_required
from garment_flow.routes.common import (list_records, create_record, get_record,
                                        update_record, delete_record)
from garment_flow.schemas.user_schema import UserSchema
from garment_flow.services.store import get_store

user_bp = Blueprint('users', __name__)
user_schema = UserSchema()


@user_bp.route('/users', methods=['GET'])
@token_required
def get_users():
    return list_records(get_store().users, user_schema)


@user_bp.route('/users', methods=['POST'])
@token_required
@role_required('admin')
def create_user():
    return create_record(get_store().users, user_schema)


@user_bp.route('/users/<int:id>', methods=['GET'])
@token_required
def get_user(id):
    return get_record(get_store().users, user_schema, id)


@user_bp.route('/users/<int:id>', methods=['PUT'])
@token_required
@role_required('admin')
def update_user(id):
    return update_record(get_store().users, user_schema, id)


@user_bp.route('/users/<int:id>', methods=['DELETE'])
@token_required
@role_required('admin')
def delete_user(id):
    return delete_record(get_store().users, id)
