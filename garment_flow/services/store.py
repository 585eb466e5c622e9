from flask import current_app

from garment_flow.services.pipeline_service import (
    YarnBatchRepository, KnittingJobRepository, DyeingJobRepository, CuttingJobRepository,
    StitchingJobRepository, PressingJobRepository, PackingJobRepository, ContainerRepository,
)
from garment_flow.services.cost_service import RawMaterialPurchaseRepository, FactoryCostRepository
from garment_flow.services.user_service import UserRepository
from garment_flow.services.dashboard_service import DashboardService

EXTENSION_KEY = 'pipeline_store'


class PipelineStore:
    """All repositories over one session. Built once in create_app and handed to the routes."""

    def __init__(self, session):
        self.session = session
        self.yarn = YarnBatchRepository(session)
        self.knitting = KnittingJobRepository(session)
        self.dyeing = DyeingJobRepository(session)
        self.cutting = CuttingJobRepository(session)
        self.stitching = StitchingJobRepository(session)
        self.pressing = PressingJobRepository(session)
        self.packing = PackingJobRepository(session)
        self.containers = ContainerRepository(session)
        self.raw_materials = RawMaterialPurchaseRepository(session)
        self.factory_costs = FactoryCostRepository(session)
        self.users = UserRepository(session)
        self.dashboard = DashboardService(session)


def get_store():
    return current_app.extensions[EXTENSION_KEY]
