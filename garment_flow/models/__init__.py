from garment_flow.models.pipeline import (
    YarnBatch, KnittingJob, DyeingJob, CuttingJob,
    StitchingJob, PressingJob, PackingJob, Container,
)
from garment_flow.models.costs import RawMaterialPurchase, FactoryCost
from garment_flow.models.users import User
