from marshmallow import fields, validate

from garment_flow.schemas.base import BaseSchema, Quantity, Timestamp


class RawMaterialPurchaseSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    vendor = fields.Str(required=True, validate=validate.Length(max=200))
    material_type = fields.Str(required=True, data_key='materialType', validate=validate.Length(max=100))
    description = fields.Str(allow_none=True, validate=validate.Length(max=2000))
    quantity = Quantity(required=True)
    unit = fields.Str(required=True, validate=validate.Length(max=30))
    cost_per_unit = Quantity(required=True, data_key='costPerUnit')
    total_cost = Quantity(required=True, data_key='totalCost')
    payment_status = fields.Str(allow_none=True, data_key='paymentStatus', validate=validate.Length(max=30))
    invoice_number = fields.Str(allow_none=True, data_key='invoiceNumber', validate=validate.Length(max=100))
    purchase_date = Timestamp(allow_none=True, data_key='purchaseDate')
    payment_date = Timestamp(allow_none=True, data_key='paymentDate')

    sanitize_fields = ('vendor', 'materialType', 'description', 'unit', 'paymentStatus', 'invoiceNumber')


class FactoryCostSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    category = fields.Str(required=True, validate=validate.Length(max=100))
    description = fields.Str(required=True, validate=validate.Length(max=2000))
    amount = Quantity(required=True)
    status = fields.Str(allow_none=True, validate=validate.Length(max=30))
    invoice_number = fields.Str(allow_none=True, data_key='invoiceNumber', validate=validate.Length(max=100))
    due_date = Timestamp(allow_none=True, data_key='dueDate')
    paid_date = Timestamp(allow_none=True, data_key='paidDate')
    recorded_at = Timestamp(allow_none=True, data_key='recordedAt')

    sanitize_fields = ('category', 'description', 'status', 'invoiceNumber')
