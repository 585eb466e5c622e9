from flask import Blueprint

from garment_flow.middleware.auth_middleware import token_required
from garment_flow.routes.common import list_records, create_record, get_record, delete_record
from garment_flow.schemas.pipeline_schema import YarnBatchSchema
from garment_flow.services.store import get_store

yarn_bp = Blueprint('yarn', __name__)
yarn_schema = YarnBatchSchema()


@yarn_bp.route('/yarn', methods=['GET'])
@token_required
def get_yarn_batches():
    return list_records(get_store().yarn, yarn_schema)


@yarn_bp.route('/yarn', methods=['POST'])
@token_required
def create_yarn_batch():
    return create_record(get_store().yarn, yarn_schema)


@yarn_bp.route('/yarn/<int:id>', methods=['GET'])
@token_required
def get_yarn_batch(id):
    return get_record(get_store().yarn, yarn_schema, id)


@yarn_bp.route('/yarn/<int:id>', methods=['DELETE'])
@token_required
def delete_yarn_batch(id):
    # removes every knitting..container row descending from this batch
    return delete_record(get_store().yarn, id)
