from flask import Blueprint

from garment_flow.middleware.auth_middleware import token_required
from garment_flow.routes.common import list_records, create_record, get_record
from garment_flow.schemas.pipeline_schema import (KnittingJobSchema, DyeingJobSchema, CuttingJobSchema,
                                                  StitchingJobSchema, PressingJobSchema, PackingJobSchema,
                                                  ContainerSchema)
from garment_flow.services.store import get_store

stage_bp = Blueprint('stages', __name__)
knitting_schema = KnittingJobSchema()
dyeing_schema = DyeingJobSchema()
cutting_schema = CuttingJobSchema()
stitching_schema = StitchingJobSchema()
pressing_schema = PressingJobSchema()
packing_schema = PackingJobSchema()
container_schema = ContainerSchema()


# ══════ KNITTING ══════

@stage_bp.route('/knitting', methods=['GET'])
@token_required
def get_knitting_jobs():
    return list_records(get_store().knitting, knitting_schema)


@stage_bp.route('/knitting', methods=['POST'])
@token_required
def create_knitting_job():
    return create_record(get_store().knitting, knitting_schema)


@stage_bp.route('/knitting/<int:id>', methods=['GET'])
@token_required
def get_knitting_job(id):
    return get_record(get_store().knitting, knitting_schema, id)


# ══════ DYEING ══════

@stage_bp.route('/dyeing', methods=['GET'])
@token_required
def get_dyeing_jobs():
    return list_records(get_store().dyeing, dyeing_schema)


@stage_bp.route('/dyeing', methods=['POST'])
@token_required
def create_dyeing_job():
    return create_record(get_store().dyeing, dyeing_schema)


@stage_bp.route('/dyeing/<int:id>', methods=['GET'])
@token_required
def get_dyeing_job(id):
    return get_record(get_store().dyeing, dyeing_schema, id)


# ══════ CUTTING ══════

@stage_bp.route('/cutting', methods=['GET'])
@token_required
def get_cutting_jobs():
    return list_records(get_store().cutting, cutting_schema)


@stage_bp.route('/cutting', methods=['POST'])
@token_required
def create_cutting_job():
    return create_record(get_store().cutting, cutting_schema)


@stage_bp.route('/cutting/<int:id>', methods=['GET'])
@token_required
def get_cutting_job(id):
    return get_record(get_store().cutting, cutting_schema, id)


# ══════ STITCHING ══════

@stage_bp.route('/stitching', methods=['GET'])
@token_required
def get_stitching_jobs():
    return list_records(get_store().stitching, stitching_schema)


@stage_bp.route('/stitching', methods=['POST'])
@token_required
def create_stitching_job():
    return create_record(get_store().stitching, stitching_schema)


@stage_bp.route('/stitching/<int:id>', methods=['GET'])
@token_required
def get_stitching_job(id):
    return get_record(get_store().stitching, stitching_schema, id)


# ══════ PRESSING ══════

@stage_bp.route('/pressing', methods=['GET'])
@token_required
def get_pressing_jobs():
    return list_records(get_store().pressing, pressing_schema)


@stage_bp.route('/pressing', methods=['POST'])
@token_required
def create_pressing_job():
    return create_record(get_store().pressing, pressing_schema)


@stage_bp.route('/pressing/<int:id>', methods=['GET'])
@token_required
def get_pressing_job(id):
    return get_record(get_store().pressing, pressing_schema, id)


# ══════ PACKING ══════

@stage_bp.route('/packing', methods=['GET'])
@token_required
def get_packing_jobs():
    return list_records(get_store().packing, packing_schema)


@stage_bp.route('/packing', methods=['POST'])
@token_required
def create_packing_job():
    return create_record(get_store().packing, packing_schema)


@stage_bp.route('/packing/<int:id>', methods=['GET'])
@token_required
def get_packing_job(id):
    return get_record(get_store().packing, packing_schema, id)


# ══════ CONTAINERS ══════

@stage_bp.route('/container', methods=['GET'])
@token_required
def get_containers():
    return list_records(get_store().containers, container_schema)


@stage_bp.route('/container', methods=['POST'])
@token_required
def create_container():
    return create_record(get_store().containers, container_schema)


@stage_bp.route('/container/<int:id>', methods=['GET'])
@token_required
def get_container(id):
    return get_record(get_store().containers, container_schema, id)
