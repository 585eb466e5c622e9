"""Repositories for the production stages, yarn intake through container shipment."""
from garment_flow.errors import ValidationError
from garment_flow.models import (YarnBatch, KnittingJob, DyeingJob, CuttingJob,
                                 StitchingJob, PressingJob, PackingJob, Container)
from garment_flow.services.repository import (Repository, Rule, optional_integer, optional_number,
                                              optional_text, optional_timestamp, reference_id)
from garment_flow.utils.validators import require_integer, require_number, require_string


class YarnBatchRepository(Repository):
    model = YarnBatch
    label = 'yarn batch'
    plural = 'yarn batches'
    order_by = 'received_at'
    unique_fields = (('batch_code', 'Batch code'),)
    rules = (
        Rule('batch_code', 'Batch Code', require_string, True),
        Rule('color', 'Color', require_string, True),
        Rule('weight_kg', 'Weight (kg)', require_number, True),
        Rule('supplier', 'Supplier', optional_text, False),
        Rule('received_at', 'Received At', optional_timestamp, False),
    )

    def describe(self, values):
        return values.get('batch_code', '')


class KnittingJobRepository(Repository):
    model = KnittingJob
    label = 'knitting job'
    plural = 'knitting jobs'
    order_by = 'completed_at'
    references = {'yarn_batch_id': ('Yarn batch', YarnBatch)}
    rules = (
        Rule('yarn_batch_id', 'Yarn Batch ID', reference_id, False),
        Rule('weight_used', 'Weight Used (kg)', require_number, True),
        Rule('fabric_produced', 'Fabric Produced (kg)', require_number, True),
        Rule('fabric_type', 'Fabric Type', require_string, True),
        Rule('size', 'Size', optional_text, False),
        Rule('status', 'Status', optional_text, False),
        Rule('completed_at', 'Completed At', optional_timestamp, False),
    )

    def describe(self, values):
        return f"{values.get('fabric_type', '')}, produced {values.get('fabric_produced')} kg"


class DyeingJobRepository(Repository):
    model = DyeingJob
    label = 'dyeing job'
    plural = 'dyeing jobs'
    order_by = 'completed_at'
    references = {'knitting_job_id': ('Knitting job', KnittingJob)}
    rules = (
        Rule('knitting_job_id', 'Knitting Job ID', reference_id, False),
        Rule('weight_kg_dyed', 'Weight Dyed (kg)', require_number, True),
        Rule('rolls_per_batch', 'Rolls Per Batch', require_integer, True),
        Rule('dye_color', 'Dye Color', optional_text, False),
        Rule('completed_at', 'Completed At', optional_timestamp, False),
    )

    def describe(self, values):
        return values.get('dye_color') or 'No color specified'


class CuttingJobRepository(Repository):
    model = CuttingJob
    label = 'cutting job'
    plural = 'cutting jobs'
    order_by = 'completed_at'
    references = {
        'dyeing_job_id': ('Dyeing job', DyeingJob),
        'knitting_job_id': ('Knitting job', KnittingJob),
    }
    rules = (
        Rule('dyeing_job_id', 'Dyeing Job ID', reference_id, False),
        Rule('knitting_job_id', 'Knitting Job ID', reference_id, False),
        Rule('style_code', 'Style Code', require_string, True),
        Rule('size', 'Size', require_string, True),
        Rule('quantity_pieces', 'Quantity Pieces', require_integer, True),
        Rule('waste_kg', 'Waste (kg)', optional_number, False),
        Rule('completed_at', 'Completed At', optional_timestamp, False),
    )

    def validate(self, data, partial=False):
        values = super().validate(data, partial)
        if values.get('dyeing_job_id') is not None and values.get('knitting_job_id') is not None:
            raise ValidationError('A cutting job takes fabric from either a dyeing job or a knitting job, not both',
                                  'dyeing_job_id')
        return values

    def describe(self, values):
        return f"Style {values.get('style_code')}, Qty {values.get('quantity_pieces')}"


class StitchingJobRepository(Repository):
    model = StitchingJob
    label = 'stitching job'
    plural = 'stitching jobs'
    order_by = 'completed_at'
    references = {'cutting_job_id': ('Cutting job', CuttingJob)}
    rules = (
        Rule('cutting_job_id', 'Cutting Job ID', reference_id, False),
        Rule('size', 'Size', require_string, True),
        Rule('quantity_stitched', 'Quantity Stitched', require_integer, True),
        Rule('rejected_count', 'Rejected Count', optional_integer, False),
        Rule('completed_at', 'Completed At', optional_timestamp, False),
    )

    def describe(self, values):
        return f"Qty {values.get('quantity_stitched')}"


class PressingJobRepository(Repository):
    model = PressingJob
    label = 'pressing job'
    plural = 'pressing jobs'
    order_by = 'completed_at'
    references = {'stitching_job_id': ('Stitching job', StitchingJob)}
    rules = (
        Rule('stitching_job_id', 'Stitching Job ID', reference_id, False),
        Rule('size', 'Size', require_string, True),
        Rule('quantity_pressed', 'Quantity Pressed', require_integer, True),
        Rule('completed_at', 'Completed At', optional_timestamp, False),
    )

    def describe(self, values):
        return f"Qty {values.get('quantity_pressed')}"


class PackingJobRepository(Repository):
    model = PackingJob
    label = 'packing job'
    plural = 'packing jobs'
    order_by = 'completed_at'
    references = {'pressing_job_id': ('Pressing job', PressingJob)}
    rules = (
        Rule('pressing_job_id', 'Pressing Job ID', reference_id, False),
        Rule('size', 'Size', require_string, True),
        Rule('box_count', 'Box Count', require_integer, True),
        Rule('quantity_packed', 'Quantity Packed', require_integer, True),
        Rule('completed_at', 'Completed At', optional_timestamp, False),
    )

    def describe(self, values):
        return f"{values.get('box_count')} boxes, Qty {values.get('quantity_packed')}"


class ContainerRepository(Repository):
    model = Container
    label = 'container'
    plural = 'containers'
    order_by = 'completed_at'
    references = {'packing_job_id': ('Packing job', PackingJob)}
    rules = (
        Rule('packing_job_id', 'Packing Job ID', reference_id, False),
        Rule('number_of_bales', 'Number of Bales', require_integer, True),
        Rule('quantity_per_bale', 'Quantity Per Bale', require_number, True),
        Rule('container_type', 'Container Type', require_string, True),
        Rule('container_number', 'Container Number', optional_text, False),
        Rule('completed_at', 'Completed At', optional_timestamp, False),
    )

    def describe(self, values):
        return f"{values.get('number_of_bales')} bales"
