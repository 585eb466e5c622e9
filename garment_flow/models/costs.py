from garment_flow.extensions import db
from datetime import datetime, timezone


class RawMaterialPurchase(db.Model):
    """Dyes, chemicals, packaging and other consumables bought from vendors."""
    __tablename__ = 'raw_material_purchases'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    vendor = db.Column(db.String(200), nullable=False)
    material_type = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    quantity = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(30), nullable=False)
    cost_per_unit = db.Column(db.Float, nullable=False)
    total_cost = db.Column(db.Float, nullable=False)
    payment_status = db.Column(db.String(30), default='pending')
    invoice_number = db.Column(db.String(100))
    purchase_date = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    payment_date = db.Column(db.DateTime(timezone=True))


class FactoryCost(db.Model):
    """Operating expenses: electricity, salaries, rent, maintenance."""
    __tablename__ = 'factory_costs'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    category = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=False)
    amount = db.Column(db.Float, nullable=False)
    status = db.Column(db.String(30), default='unpaid')
    invoice_number = db.Column(db.String(100))
    due_date = db.Column(db.DateTime(timezone=True))
    paid_date = db.Column(db.DateTime(timezone=True))
    recorded_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
