from flask import Blueprint

from garment_flow.middleware.auth_middleware import token_required
from garment_flow.routes.common import (list_records, create_record, get_record,
                                        update_record, delete_record)
from garment_flow.schemas.cost_schema import RawMaterialPurchaseSchema, FactoryCostSchema
from garment_flow.services.store import get_store

cost_bp = Blueprint('costs', __name__)
purchase_schema = RawMaterialPurchaseSchema()
factory_cost_schema = FactoryCostSchema()


# ══════ RAW MATERIAL PURCHASES ══════

@cost_bp.route('/raw-material', methods=['GET'])
@token_required
def get_raw_material_purchases():
    return list_records(get_store().raw_materials, purchase_schema)


@cost_bp.route('/raw-material', methods=['POST'])
@token_required
def create_raw_material_purchase():
    return create_record(get_store().raw_materials, purchase_schema)


@cost_bp.route('/raw-material/<int:id>', methods=['GET'])
@token_required
def get_raw_material_purchase(id):
    return get_record(get_store().raw_materials, purchase_schema, id)


@cost_bp.route('/raw-material/<int:id>', methods=['PUT'])
@token_required
def update_raw_material_purchase(id):
    return update_record(get_store().raw_materials, purchase_schema, id)


@cost_bp.route('/raw-material/<int:id>', methods=['DELETE'])
@token_required
def delete_raw_material_purchase(id):
    return delete_record(get_store().raw_materials, id)


# ══════ FACTORY COSTS ══════

@cost_bp.route('/factory-cost', methods=['GET'])
@token_required
def get_factory_costs():
    return list_records(get_store().factory_costs, factory_cost_schema)


@cost_bp.route('/factory-cost', methods=['POST'])
@token_required
def create_factory_cost():
    return create_record(get_store().factory_costs, factory_cost_schema)


@cost_bp.route('/factory-cost/<int:id>', methods=['GET'])
@token_required
def get_factory_cost(id):
    return get_record(get_store().factory_costs, factory_cost_schema, id)


@cost_bp.route('/factory-cost/<int:id>', methods=['PUT'])
@token_required
def update_factory_cost(id):
    return update_record(get_store().factory_costs, factory_cost_schema, id)


@cost_bp.route('/factory-cost/<int:id>', methods=['DELETE'])
@token_required
def delete_factory_cost(id):
    return delete_record(get_store().factory_costs, id)
