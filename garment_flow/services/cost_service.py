from garment_flow.models import RawMaterialPurchase, FactoryCost
from garment_flow.services.repository import Repository, Rule, optional_text, optional_timestamp
from garment_flow.utils.validators import require_number, require_string


class RawMaterialPurchaseRepository(Repository):
    model = RawMaterialPurchase
    label = 'raw material purchase'
    plural = 'raw material purchases'
    order_by = 'purchase_date'
    rules = (
        Rule('vendor', 'Vendor', require_string, True),
        Rule('material_type', 'Material Type', require_string, True),
        Rule('description', 'Description', optional_text, False),
        Rule('quantity', 'Quantity', require_number, True),
        Rule('unit', 'Unit', require_string, True),
        Rule('cost_per_unit', 'Cost Per Unit', require_number, True),
        Rule('total_cost', 'Total Cost', require_number, True),
        Rule('payment_status', 'Payment Status', optional_text, False),
        Rule('invoice_number', 'Invoice Number', optional_text, False),
        Rule('purchase_date', 'Purchase Date', optional_timestamp, False),
        Rule('payment_date', 'Payment Date', optional_timestamp, False),
    )

    def describe(self, values):
        return f"{values.get('material_type')} from {values.get('vendor')}"


class FactoryCostRepository(Repository):
    model = FactoryCost
    label = 'factory cost'
    plural = 'factory costs'
    order_by = 'recorded_at'
    rules = (
        Rule('category', 'Category', require_string, True),
        Rule('description', 'Description', require_string, True),
        Rule('amount', 'Amount', require_number, True),
        Rule('status', 'Status', optional_text, False),
        Rule('invoice_number', 'Invoice Number', optional_text, False),
        Rule('due_date', 'Due Date', optional_timestamp, False),
        Rule('paid_date', 'Paid Date', optional_timestamp, False),
        Rule('recorded_at', 'Recorded At', optional_timestamp, False),
    )

    def describe(self, values):
        return f"{values.get('category')} - {values.get('description')}"
