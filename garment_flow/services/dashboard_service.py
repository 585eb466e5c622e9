"""Dashboard totals rolled up across every production stage."""
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from garment_flow.models import (YarnBatch, KnittingJob, DyeingJob, CuttingJob,
                                 StitchingJob, PackingJob, Container)

logger = logging.getLogger(__name__)

# stat key -> summed column
STAT_COLUMNS = {
    'totalYarnKg': YarnBatch.weight_kg,
    'totalFabricKg': KnittingJob.fabric_produced,
    'totalDyedKg': DyeingJob.weight_kg_dyed,
    'totalCutPieces': CuttingJob.quantity_pieces,
    'totalStitchedPieces': StitchingJob.quantity_stitched,
    'totalPackedPieces': PackingJob.quantity_packed,
    'totalBalesShipped': Container.number_of_bales,
}


def empty_stats():
    return {key: 0 for key in STAT_COLUMNS}


class DashboardService:
    def __init__(self, session):
        self.session = session

    def get_stats(self):
        """Sum each stage independently. Never raises: on any store failure the
        error is logged and all-zero totals are returned so the dashboard stays up."""
        logger.debug('Calculating dashboard statistics')
        try:
            stats = {}
            for key, column in STAT_COLUMNS.items():
                total = self.session.execute(select(func.sum(column))).scalar()
                stats[key] = self._number(total)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f'Error calculating dashboard stats: {e}')
            return empty_stats()
        logger.debug('Dashboard stats calculated successfully')
        return stats

    @staticmethod
    def _number(total):
        # SUM over zero rows is NULL
        if total is None:
            return 0
        if isinstance(total, float) and total.is_integer():
            return int(total)
        return total
