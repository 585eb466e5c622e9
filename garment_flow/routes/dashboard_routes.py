from flask import Blueprint

from garment_flow.middleware.auth_middleware import token_required
from garment_flow.services.store import get_store
from garment_flow.utils.responses import json_response

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/dashboard/stats', methods=['GET'])
@token_required
def get_dashboard_stats():
    return json_response(get_store().dashboard.get_stats())
