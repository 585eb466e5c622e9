from marshmallow import fields, validate

from garment_flow.schemas.base import BaseSchema, Quantity, Reference, Timestamp


class YarnBatchSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    batch_code = fields.Str(required=True, data_key='batchCode', validate=validate.Length(max=100))
    color = fields.Str(required=True, validate=validate.Length(max=100))
    weight_kg = Quantity(required=True, data_key='weightKg')
    supplier = fields.Str(allow_none=True, validate=validate.Length(max=200))
    received_at = Timestamp(allow_none=True, data_key='receivedAt')

    sanitize_fields = ('batchCode', 'color', 'supplier')


class KnittingJobSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    yarn_batch_id = Reference(allow_none=True, data_key='yarnBatchId')
    fabric_type = fields.Str(required=True, data_key='fabricType', validate=validate.Length(max=100))
    size = fields.Str(allow_none=True, validate=validate.Length(max=50))
    weight_used = Quantity(required=True, data_key='weightUsed')
    fabric_produced = Quantity(required=True, data_key='fabricProduced')
    status = fields.Str(allow_none=True, validate=validate.Length(max=30))
    completed_at = Timestamp(allow_none=True, data_key='completedAt')

    sanitize_fields = ('fabricType', 'size', 'status')


class DyeingJobSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    knitting_job_id = Reference(allow_none=True, data_key='knittingJobId')
    weight_kg_dyed = Quantity(required=True, data_key='weightKgDyed')
    rolls_per_batch = Quantity(required=True, data_key='rollsPerBatch')
    dye_color = fields.Str(allow_none=True, data_key='dyeColor', validate=validate.Length(max=100))
    completed_at = Timestamp(allow_none=True, data_key='completedAt')

    sanitize_fields = ('dyeColor',)


class CuttingJobSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    dyeing_job_id = Reference(allow_none=True, data_key='dyeingJobId')
    knitting_job_id = Reference(allow_none=True, data_key='knittingJobId')
    style_code = fields.Str(required=True, data_key='styleCode', validate=validate.Length(max=100))
    size = fields.Str(required=True, validate=validate.Length(max=50))
    quantity_pieces = Quantity(required=True, data_key='quantityPieces')
    waste_kg = Quantity(allow_none=True, data_key='wasteKg')
    completed_at = Timestamp(allow_none=True, data_key='completedAt')

    sanitize_fields = ('styleCode', 'size')


class StitchingJobSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    cutting_job_id = Reference(allow_none=True, data_key='cuttingJobId')
    size = fields.Str(required=True, validate=validate.Length(max=50))
    quantity_stitched = Quantity(required=True, data_key='quantityStitched')
    rejected_count = Quantity(allow_none=True, data_key='rejectedCount')
    completed_at = Timestamp(allow_none=True, data_key='completedAt')

    sanitize_fields = ('size',)


class PressingJobSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    stitching_job_id = Reference(allow_none=True, data_key='stitchingJobId')
    size = fields.Str(required=True, validate=validate.Length(max=50))
    quantity_pressed = Quantity(required=True, data_key='quantityPressed')
    completed_at = Timestamp(allow_none=True, data_key='completedAt')

    sanitize_fields = ('size',)


class PackingJobSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    pressing_job_id = Reference(allow_none=True, data_key='pressingJobId')
    size = fields.Str(required=True, validate=validate.Length(max=50))
    box_count = Quantity(required=True, data_key='boxCount')
    quantity_packed = Quantity(required=True, data_key='quantityPacked')
    completed_at = Timestamp(allow_none=True, data_key='completedAt')

    sanitize_fields = ('size',)


class ContainerSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    packing_job_id = Reference(allow_none=True, data_key='packingJobId')
    number_of_bales = Quantity(required=True, data_key='numberofBales')
    quantity_per_bale = Quantity(required=True, data_key='quantityPerBale')
    container_type = fields.Str(required=True, data_key='containerType', validate=validate.Length(max=50))
    container_number = fields.Str(allow_none=True, data_key='containerNumber', validate=validate.Length(max=100))
    completed_at = Timestamp(allow_none=True, data_key='completedAt')

    sanitize_fields = ('containerType', 'containerNumber')
